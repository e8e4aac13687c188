# justcore

Building blocks for a command runner that reads recipes from a `justfile`.
Each module can be used on its own.

## What is in the package

- `justcore.search` — `Search.find(config, invocation_directory)` locates an
  existing justfile and the directory to run recipes in;
  `Search.init(config, invocation_directory)` chooses where a new justfile
  should go. Also `find_justfile(directory)` (walks up from `directory`,
  matching the name `justfile` ignoring ASCII case), `project_root(directory)`
  (nearest ancestor holding `.bzr`, `.git`, `.hg`, `.svn` or `_darcs`, else
  `directory` itself) and `clean(invocation_directory, path)` (joins and
  resolves `..` lexically, never climbing above the root).
- `justcore.search_config` — the four search configurations:
  `FromInvocationDirectory`, `FromSearchDirectory`, `WithJustfile`,
  `WithJustfileAndWorkingDirectory`.
- `justcore.search_error` — `SearchError` and its subclasses
  `MultipleCandidatesError`, `SearchIoError`, `NotFoundError`,
  `JustfileHadNoParentError`.
- `justcore.shebang` — `Shebang.parse(line)` splits a `#!` line into an
  interpreter and an optional argument; `script_filename(recipe)` adds `.bat`
  for `cmd`/`cmd.exe` and `.ps1` for `powershell`/`powershell.exe`;
  `include_shebang_line()` is false for `cmd`.
- `justcore.unindent` — `unindent(text)` removes the indentation shared by
  all non-blank lines, plus the helpers `indentation`, `blank` and `common`.
- `justcore.token`, `justcore.token_kind`, `justcore.string_kind`,
  `justcore.string_literal` — tokens, their kinds, string delimiters and
  literals. `Token.render_context(prefix, suffix)` returns the token's source
  line with carets under it, tabs shown as four spaces.
- `justcore.scope` — `Scope` holds `Binding`s and looks names up through
  parent scopes.
- `justcore.table` — `Table`, items keyed by their own `key` and iterated in
  key order.
- `justcore.settings` — `Settings` and `Shell`; `shell_command(config)`
  returns the shell argument vector, preferring a shell given in `config`.
- `justcore.runtime_error` — `RunError` and its subclasses (for example
  `CodeError`, `BacktickError`, `UnknownRecipesError`,
  `ArgumentCountMismatchError`), each with `message()` and an exit status
  from `code()`; `OutputError` describes why a command's output could not be
  had.
- `justcore.warning` — `DotenvLoadWarning`, with `render()` giving the text
  shown to the user.
- `justcore.formatting` — `show_whitespace`, `count`, `tick`, `and_ticked`,
  `or_ticked`.
- `justcore.options` — the `Verbosity` and `UseColor` enums.
- `justcore.suggestion` — `Suggestion`, rendered as a "Did you mean" line.
- `justcore.tree` — `Tree`, s-expressions for describing expected parses.
- `justcore.fstree` — `instantiate(base, entries)` and the context manager
  `tmptree(entries)` build files and directories from nested mappings.

## Installation

```
pip install justcore
```

## Example

```python
from pathlib import Path

from justcore.search import Search
from justcore.search_config import FromInvocationDirectory
from justcore.search_error import SearchError
from justcore.shebang import Shebang
from justcore.unindent import unindent

try:
    search = Search.find(FromInvocationDirectory(), Path.cwd())
    print(search.justfile, search.working_directory)
except SearchError as error:
    print(error)                               # e.g. "No justfile found"

shebang = Shebang.parse("#!/usr/bin/env python -x")
print(shebang.interpreter, shebang.argument)   # /usr/bin/env python -x
print(shebang.script_filename("build"))        # build

print(repr(unindent("  foo\n  bar")))          # 'foo\nbar'
```

## What it does not do

There is no command-line program here, and no lexer, parser or evaluator for
justfiles: nothing in the package reads a justfile's recipes or runs them.
The error classes describe failures of running recipes, but raising them is
left to the code that uses this package.

## Running the tests

```
pip install -e .[test]
pytest
```