# myshell

A small interactive shell for POSIX systems. It reads commands at a
`myshell> ` prompt and runs them. It supports pipelines, one redirection
per command, background jobs and a command history that is kept between
sessions.

## Installation

```
pip install .
```

## Running

```
myshell
```

At start-up the shell loads `~/.myshell_history` and then runs each line
of `~/.myshellrc`, if those files exist. It then reads commands until end
of input (Ctrl-D). When the `readline` module is available it is used for
line editing and for recalling earlier lines. Ctrl-C does not end the
shell. It only prints a newline.

## Command syntax

- Words are split on spaces, tabs, carriage returns and newlines. Each
  command keeps at most 63 words.
- `a | b | c` joins commands into a pipeline. Empty segments are skipped,
  and at most 10 commands are kept.
- `cmd > file` writes the command's output to `file`. The file is created
  with mode 0644, or truncated if it exists.
- `cmd < file` reads the command's input from `file`.
- Only the first `>` or `<` in a command takes effect. Anything after its
  file name is ignored. A missing file name is reported as an error.
- A `&` as the very last character of the line runs the pipeline in the
  background. The shell prints `[job_id] pid running in background` and
  `[Running in background]`. The last command of the pipeline is tracked
  as the job.
- A command that cannot be started or opened is reported on standard
  error. The rest of the pipeline still runs.

Finished background jobs are removed from the job list before each
prompt and before each line is run.

## Built-in commands

Built-ins take effect only when they are the sole command on the line.

| Command        | Effect                                                        |
|----------------|---------------------------------------------------------------|
| `cd DIR`       | change the working directory                                  |
| `exit`         | leave the shell at once                                       |
| `jobs`         | list background jobs, newest first, as `[id] pid command`     |
| `fg JOB_ID`    | send the job SIGCONT, wait for it to finish, drop it          |
| `bg JOB_ID`    | send the job SIGCONT                                          |

`fg` and `bg` print `myshell: no such job` for an unknown number, and a
usage line when no number is given.

## History

A line is recorded unless it is empty or repeats the previous line. At
most the 1000 most recent lines are kept. The history is written to
`~/.myshell_history` when the shell reaches end of input. Leaving with
`exit` does not save it.

## What it does not do

There is no quoting, escaping, globbing or variable expansion. There is
no `>>`, `2>`, `&&`, `||` or `;`. Jobs are not put in their own process
groups, and `fg` does not hand the terminal over to the job. The shell
does not catch Ctrl-Z to stop a job.

## Using it from Python

```python
from myshell.parser import parse_line, split_redirection
from myshell.shell import Shell

pipeline = parse_line("ls -l | wc -l &")
print(pipeline.commands, pipeline.background)   # [['ls', '-l'], ['wc', '-l']] True

args, redirection = split_redirection(["sort", "<", "names.txt"])
print(args, redirection)   # ['sort'] Redirection(operator='<', target='names.txt')

shell = Shell()
shell.execute("echo hello > greeting.txt")
```

The modules are:

- `myshell.parser`: `parse_line`, `split_redirection`, `Pipeline`, `Redirection`
- `myshell.executor`: `run_pipeline`, `format_command_line`
- `myshell.jobs`: `Job`, `JobTable`
- `myshell.history`: `History`, with `add`, `load` and `save`
- `myshell.builtins`: `is_builtin`, `run_builtin`, `ExitShell`
- `myshell.shell`: `Shell`, with `execute`, `run_rc` and `repl`, and `main`

## Running the tests

```
pip install ".[test]"
pytest
```