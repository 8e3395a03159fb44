# ferry

A ferry for your files. Instead of typing both source and destination paths
up front, as `cp` and `mv` make you do, you pick files up in one directory,
go wherever you like, and drop them there.

## Installation

```
pip install .
```

This installs the `ferry` command. The interactive picker uses the
standard-library `curses` module, so the command needs a platform that
provides it (Linux, macOS and other POSIX systems).

## Usage

Selecting files adds them to a selection that persists between runs. It is
stored in a file named `selection` in your user cache directory for `ferry`.
Paths already in the selection are not added twice.

Select files by name. Relative paths are resolved against the current
directory, and paths that don't exist are skipped with a warning:

```
ferry select report.pdf notes.txt
```

Select everything below a starting directory (default: the current
directory) whose path matches a regular expression. The search is
recursive, and the pattern is searched for anywhere in each path as it is
found during the walk, that is, the starting directory joined with the
names below it (for example `./docs/doc_001.pdf` when starting from `.`):

```
ferry select --regex 'doc_\d{3}\.pdf$' --path ~/Downloads
```

Pick files from a list in the terminal. Only regular files directly inside
the directory are shown, sorted by name. Up and Down move the cursor, Space
toggles a file, and Enter, `q` or Esc finishes and keeps the files that are
marked. Running `ferry select` with no arguments also opens this list for
the current directory.

```
ferry select --interactive --path ~/Downloads
ferry select -i
```

`--regex` and `--interactive` cannot be combined, neither takes item paths,
and `--path` (`-P`) is only accepted together with one of them. Add
`--dry-run` to any selection to see what would be chosen without saving it.

Show the current selection, as absolute paths (the default, also
`--absolute`) or relative to the current directory:

```
ferry list
ferry list --relative
```

Go to the destination directory, then copy or move the selected items into
it:

```
cd ~/Documents
ferry copy
ferry move
```

If an item of the same name already exists, ferry stops with an error. Pass
`--force` (`-f`) to overwrite it; with `move`, an existing file or directory
in the way is removed first. After a successful copy or move the selection
is cleared.

## Output

- `--silent` prints nothing except errors.
- `--verbose` also prints each path as it is resolved and selected.

These are global options, so they go before the subcommand, as in
`ferry --verbose select *.txt`. The two cannot be used together. When an
operation fails, ferry prints `Error: ...` to standard error and exits with
status 1. `ferry --version` prints the version.

## Limitations

- `ferry copy` copies regular files only (contents and permission bits).
  A selected directory cannot be copied; use `ferry move` for directories.
- `ferry move` renames items in place, so source and destination must be on
  the same filesystem.
- Copy and move always drop into the current directory; there is no option
  for another destination.

## Using it from Python

The pieces behind the command can be used directly:

- `ferry.store.SelectionStore` reads, adds to and clears the selection file
  (`read()`, `add(paths)`, `clear()`, `path()`); give it a directory to keep
  the file somewhere other than the default cache directory.
- `ferry.operations.copy_selection`, `move_selection` and `list_selection`
  carry out the copy, move and list commands, with an optional destination
  or base directory.
- `ferry.select.handle_select` runs a selection and returns the chosen paths.
- `ferry.config.Output` controls what is printed; failures raise
  `ferry.config.FerryError`.