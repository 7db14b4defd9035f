# minishell

The building blocks of a small command shell: quote-aware splitting of
command lines, backslash escapes, `$NAME` and `$?` expansion, syntax checks
with the shell's error messages, an ordered variable store, and the
builtins `echo`, `cd`, `pwd`, `export`, `unset`, `env` and `exit`.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `minishell.quoting`

- `split_shell(text, sep)` splits on `sep` where it is neither inside quotes
  nor after a backslash, dropping empty pieces. `split_sh(text, sep)` does the
  same but keeps the second character of a doubled separator (as in `>>`).
- `find_unquoted(text, char)` gives the index of the first unquoted,
  unescaped `char`, or `None`.
- `inside_quotes(text, index)` tells whether a position sits inside an open
  quote.
- `split_words(text, sep)` and `trim(text, chars)` are plain splitting and
  stripping that accept `None`.
- `delete_quote(arg)` and `delete_quote_pair(text, start, quote)` remove
  quote pairs; a quote of the other kind inside a removed pair becomes a
  marker character, which `restore_quotes(text)` turns back into the quote.
- `extract_arg(text)` returns what follows the command word, up to the first
  output redirection.
- `atoi(text)` parses a leading integer with C `atoi` rules and 32-bit
  wrap-around.

### `minishell.environment`

- `Environment` is an ordered list of `name=value` variables. Names may
  repeat; lookups use the first match. It offers `get`, `set`, `names`,
  `remove`, `append` (for `NAME=value` text, dropping surrounding quotes from
  the value), `update_existing`, `take` and `render`, which gives one
  `name=value` line per variable. `Environment.from_environ` builds one from a
  mapping or from `NAME=value` strings.
- `ShellState` is a dataclass holding what a shell keeps between lines: the
  exported variables `env`, the not-yet-exported variables `waiting`, the last
  `status`, the `exiting` flag, the command counter `step`, the current
  directory `path` and the `history`.

### `minishell.expansion`

- `unescape(text, mode)` replaces backslash sequences; `EscapeMode.ECHO`
  interprets `\n \t \v \f \b \r \e \\`, `EscapeMode.EXEC` interprets
  `\\ \" \'`. `escape_code(char)` gives the character a single sequence
  stands for.
- `expand_variables(state, line)` expands `$NAME` and `$?`; unknown names
  are removed. `expand_status(state, line)` handles `$?` alone, and reading
  the status resets it to zero.
- `prepare(state, text)` unescapes, expands and trims one command.

### `minishell.errors`

- `check_unexpected(line)` and `check_redirections(line)` raise
  `ShellSyntaxError` for misplaced `|`, `;`, `<`, `>` or for doubled and
  dangling redirections. `check_double_output` and `check_double_input`
  report the doubled cases as booleans.
- `ShellSyntaxError.format(step)` gives the message as the shell prints it,
  for example `minishell: 1: Synthax error: '|' unexpected`.
- `format_cd_error`, `format_not_found`, `format_file_not_found` and
  `format_illegal_exit` build the other messages; `strip_cd_input` drops the
  `<` characters from a `cd < dir` command.

### `minishell.exports`

- `export(state, args)` sets, updates or promotes variables from `waiting`
  into `env`, and returns what it writes (`export: bad variable name` for a
  rejected name, which also sets the status to 2). With no arguments it
  returns `sorted_listing(state)`.
- `unset(state, args)` removes the named variables.
- `env_listing(state)` returns the text of `env`.
- `is_bad_name(word)` and `strip_name_quotes(word)` are the name checks that
  `export` uses.

### `minishell.builtins`

- `echo(state, arg)` and `pwd(state)` return what they write; `echo`
  understands `-n`.
- `cd(state, arg, stderr)` changes the process's working directory and keeps
  `PWD` and `OLDPWD` up to date; errors are written to `stderr`.
  `classify_cd_path(text)` tells how a target is read.
- `exit_builtin(state, arg, step, stderr)` sets the exit status and returns
  whether the shell is to stop; a non-numeric argument is reported and sets
  the status to 2.

## Example

```python
from minishell.builtins import echo
from minishell.environment import Environment, ShellState
from minishell.errors import ShellSyntaxError, check_unexpected
from minishell.expansion import expand_variables
from minishell.quoting import split_shell

state = ShellState(env=Environment.from_environ({"HOME": "/home/user"}))

expand_variables(state, "echo $HOME")    # 'echo /home/user'
split_shell("echo 'a;b'; ls", ";")       # ["echo 'a;b'", ' ls']
echo(state, "-n hi")                     # 'hi'

try:
    check_unexpected("| ls")
except ShellSyntaxError as error:
    print(error.format(1), end="")       # minishell: 1: Synthax error: '|' unexpected
```

## What it does not do

The package has no interactive command loop and no command to start: it
does not read lines and show a prompt, does not break a line into commands
with their redirections, does not open redirection files, does not look up
programs in `PATH`, and does not start programs or connect them with pipes.
It provides the pieces such a loop would call.

## Running the tests

```
pip install .[test]
pytest
```