# minish

`minish` holds the pieces of a small POSIX-style shell: an environment
store, variable expansion and quote removal, a lexer with syntax checking,
word splitting for command text, and the builtins `cd`, `echo`, `env`,
`exit`, `export`, `pwd` and `unset`. It has no dependencies beyond the
standard library.

## Installing

```
pip install .
```

## Modules

### `minish.env`

`Environment` keeps an ordered list of `NAME=value` or bare `NAME` entries.

- `Environment(entries)` and `Environment.from_os()` build one.
- `get(name)` returns the value, or `None` when the name has no value.
- `exists(name)` tells whether the name is defined, with or without a value.
- `export(assignment)` adds, replaces or (with `NAME+=value`) appends to a
  variable, and raises `ValueError` for an invalid identifier.
- `unset(names)` removes the named variables.
- `sorted_entries()`, `search_path()` (the value of `PATH`), `to_dict()`
  (only the variables that have a value), `len()` and iteration.

Helpers: `is_invalid_identifier`, `remove_plus`, `split_assignment` and
`export_line`, which formats an entry as `export NAME="value"`.

### `minish.expand`

- `expand(text, env, exit_status)` replaces `$NAME` and `$?` outside single
  quotes. Quotes are kept, an unquoted `$` right before a quote is dropped,
  and a `$` not followed by a name stays as it is.
- `unquote(text)` removes paired quotes.
- `is_quoted(text)` tells whether the text holds a quote character.

### `minish.lexer`

- `tokenize(line)` splits a line into `Token(content, type)` values, where
  `type` is `TokenType.WORD` or `TokenType.OPERATOR`.
- `check(tokens)` raises `ShellSyntaxError` (its `exit_status` is 258) for a
  leading `|`, an unknown operator, an operator at the end of the line, two
  operators in a row other than `|` followed by a redirection, or an
  unclosed quote.
- `lex(line)` does both; `format_tokens(tokens)` renders them as
  `KIND:content` lines.

### `minish.words`

`split_words` and `count_words` split command text at spaces outside
quotes, `split_search_path` turns a `PATH` value into directories ending
with `/`, and `base_name`, `has_slash`, `ends_with_slash` and `is_builtin`
help decide how a command name is run.

### `minish.builtins`

`builtin_cd`, `builtin_echo`, `builtin_env`, `builtin_exit`,
`builtin_export`, `builtin_pwd` and `builtin_unset` return an exit status
and write to the streams they are given. `builtin_exit` raises
`ExitRequest` when the shell should stop; its `status` is the status to use,
or `None` to keep the last one.

## Example

```python
import io

from minish.builtins import builtin_echo
from minish.env import Environment
from minish.expand import expand, unquote
from minish.lexer import lex

env = Environment(["HOME=/home/user"])
print(unquote(expand('"$HOME"/bin', env, 0)))   # /home/user/bin
print([token.content for token in lex("cat < in | wc -l")])
# ['cat', '<', 'in', '|', 'wc', '-l']

env.export("GREETING=hello")
out = io.StringIO()
builtin_echo("echo $GREETING world", env, 0, out)
print(out.getvalue(), end="")                   # hello world
```

## What it does not do

The package has no interactive command and no prompt. It does not build
command tables from tokens, open redirection files, read heredocs, or run
external programs and pipelines; those steps are left to the code that uses
these modules.

## Tests

```
pip install .[test]
pytest
```