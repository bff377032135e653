# mysh

A small interactive shell for POSIX systems. It reads a line, splits it on
whitespace, and either runs one of its built-in commands or starts external
programs, with support for pipelines (`|`) and redirection (`<`, `>`, `>>`).
While you type, it shows a grey suggestion for the command name and fills it
in when you press Tab.

## Installing

```
pip install .
```

## Running

```
mysh
```

The prompt is `mysh> `. Type `exit` or send end-of-file on an empty line to
leave. Every non-empty line is recorded in the history.

### Typing

- Printable characters are added to the line; Backspace removes the last one.
- As you type, the part of the matching command names that they all share and
  that you have not typed yet is shown in grey.
- Tab with exactly one matching command name completes it; with several, the
  matches are listed below the line.
- Enter runs the line.

Suggestions cover these names: `cd`, `echo`, `pwd`, `exit`, `history`,
`touch`, `mkdir`, `cat`, `head`, `chmod`, `ls`, `clear`, `help`.

### Built-in commands

| Command              | What it does                                    |
|----------------------|-------------------------------------------------|
| `cd [dir \| -]`      | change directory (`$HOME` with no argument, `$OLDPWD` with `-`) |
| `pwd`                | print the working directory                     |
| `echo args...`       | print the arguments, each followed by a space   |
| `touch file`         | create the file if it does not exist            |
| `mkdir dir`          | create a directory                              |
| `cat [files...]`     | print files, or standard input with no files    |
| `head [-n N] [file]` | print the first lines of a file (10 by default) |
| `chmod mode file`    | change permissions; mode is octal               |
| `history [N]`        | show the last N commands (up to 100 are kept)   |
| `help`               | list the built-in commands                      |
| `exit`               | leave the shell                                 |

Built-in commands do not take part in pipelines or redirection; a line that
contains `|` always runs external programs. Up to ten commands may be joined
in one pipeline. Words are split on blanks only: there is no quoting,
globbing or variable expansion, and at most 63 words are kept per line.

### Examples

```
mysh> ls -l | grep py > listing.txt
mysh> sort < listing.txt >> sorted.txt
mysh> head -n 3 sorted.txt
```

## What it does not do

- The line editor has no cursor movement, no arrow-key history recall and no
  line editing beyond Backspace.
- History lives in memory only and is not saved between sessions.
- There are no job control, background jobs (`&`), `;` or `&&` separators,
  or scripts.

## Using it as a library

The parts of the shell can be used on their own:

- `mysh.trie` — `Trie` (`insert`, `find_suggestions`, `description`) and
  `build_command_trie()`.
- `mysh.parse` — `parse_input`, `count_pipes`, `has_pipeline`,
  `parse_pipeline` (raises `PipelineError` for too many pipes) and
  `parse_redirection`, which returns the command words and a `Redirection`.
- `mysh.history` — `History` (`add`, `entries`, `show`, `clear`).
- `mysh.builtins` — `Builtins`, whose `handle(args)` runs a built-in command.
- `mysh.execute` — `execute_single_command`, `execute_pipeline` and
  `execute_command`.
- `mysh.completion` — `Completer` for readline-style completion and
  `init_readline()`.
- `mysh.raw_input` — `LineEditor`, `common_prefix`, `raw_mode` and
  `read_input_with_suggestions`.
- `mysh.main` — `main()`, the interactive loop.

```python
from mysh.trie import build_command_trie
from mysh.parse import parse_input, parse_pipeline

trie = build_command_trie()
trie.find_suggestions("c")        # ['cat', 'cd', 'chmod', 'clear']
trie.description("pwd")           # 'Print working directory'

args = parse_input("ls -l | wc -l")
parse_pipeline(args)              # [['ls', '-l'], ['wc', '-l']]
```

## Running the tests

```
pip install .[test]
pytest
```