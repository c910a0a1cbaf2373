# impomo

A Pomodoro timer with three ways of working:

- **To-do list**: a plain list of tasks you can add, rename, tick off,
  reorder and delete.
- **ImPomodoro**: a list of tasks, each with its own duration in minutes.
  The timer runs through them one after another. When a task's time is up it
  is marked as done and the next one starts.
- **Classic Pomodoro**: work blocks separated by short breaks, with a long
  break after each cycle. The work length, the break lengths, the number of
  cycles and the number of work blocks per cycle can all be changed.

Time spent in both Pomodoro modes is recorded per day, together with the
number of ImPomodoro tasks completed, so you can look back at any date.

The settings, the task lists, the session state and the statistics are kept
in files in a data directory, which is the current directory unless you say
otherwise. The settings are sound on or off, the sound to play, and a light
or dark theme. Because the session state is kept too, a session carries on
where you left it. These are the files:

| File                                | Contents                               |
|-------------------------------------|----------------------------------------|
| `AppSettings.json`                  | sound and theme settings               |
| `tasks.db`                          | the to-do list (SQLite)                |
| `pomodoroTasks.db`                  | the ImPomodoro task list (SQLite)      |
| `ExtendedPomodoroSessionState.json` | ImPomodoro progress                    |
| `ClassicPomodoroSettings.json`      | classic durations and counts           |
| `ClassicPomodoroSessionState.json`  | classic progress                       |
| `statistics.db`                     | per-day totals (SQLite)                |

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no third-party dependencies.

## Command line

Every command takes the data directory as an option before the command name:
`impomo --data-dir PATH ...`.

```
impomo report [DAY]                  # statistics for DAY (YYYY-MM-DD or DD-MM-YYYY); today by default
impomo todo [list]                   # show the to-do list
impomo todo add NAME
impomo todo done N                   # tick off task number N (counting from 1)
impomo todo remove N
impomo tasks [list]                  # show the timed tasks and the current one
impomo tasks add NAME [MINUTES]      # 25 minutes by default
impomo tasks clear
impomo classic [status]              # current phase and time left
impomo classic configure WORK SHORT_BREAK LONG_BREAK CYCLES WORK_BLOCKS
impomo classic reset
impomo theme {Light,Dark}
impomo sound {Fanfares,"Soft Alarm"}
impomo mute
impomo unmute
impomo run {classic,tasks}           # count down in the terminal
```

Each list holds at most 20 tasks. `classic configure` accepts these ranges:

- work: 1–120 minutes
- short break: 1–60 minutes
- long break: 1–90 minutes
- cycles: 1–15
- work blocks per cycle: 1–15

If no classic settings file exists yet, the classic mode starts with these
values:

- 25 minutes of work
- 5-minute short breaks
- 15-minute long breaks
- 4 cycles of 4 work blocks

`run` counts down once a second and shows the time left. It keeps going as
long as the timer runs, and the classic mode moves on through its phases by
itself. Press Ctrl-C to stop.

## Using it as a library

```python
from impomo.tasks import create_task
from impomo.timer import Timer, format_time

task = create_task("Pomodoro", "Write report", 25)
task.edit_duration(40)

timer = Timer()
timer.set_time(task.duration * 60)
timer.start()
timer.tick()                 # call once per elapsed second
print(timer.label)           # 39:59
print(format_time(25 * 60))  # 25:00
```

`impomo.app.App(data_dir)` loads everything from a data directory. It gives
you the following:

- `todo_list`, `pomodoro_list`, `extended`, `classic`, `statistics` and
  `settings`
- `add_todo_task()`, `add_pomodoro_task()`, `configure_classic(...)`,
  `set_theme(...)`, `set_sound(...)`, `set_sound_enabled(...)` and
  `report(day)`
- `styles`, the style sheets for the current theme

It is a context manager that closes the databases on exit.

| Module                 | What it holds                                                      |
|------------------------|--------------------------------------------------------------------|
| `impomo.settings`      | `AppSettings`: sound and theme, saved to and loaded from JSON      |
| `impomo.tasks`         | `Task`, `PomodoroTask` and `create_task`                           |
| `impomo.timer`         | `Timer`, a countdown driven by `tick()`, `TimerObserver` and `format_time` |
| `impomo.notifications` | `Notifications`: plays the chosen sound when sound is on           |
| `impomo.statistics`    | `Statistics`, `DailyReport` and `format_date`                      |
| `impomo.todolist`      | `ToDoList`                                                         |
| `impomo.pomodorolist`  | `PomodoroList`: timed tasks, guarding the running one from edits   |
| `impomo.extended`      | `ExtendedPomodoro`: runs a `PomodoroList`                          |
| `impomo.classic`       | `ClassicPomodoro` and `Phase`                                      |
| `impomo.themes`        | `Theme`, `style_for`, `timer_style` and `timer_button_style`       |
| `impomo.app`           | `App` and the command-line `main`                                  |

## What it does not do

- There is no graphical window. The interface is the command line above.
  `impomo.themes` only produces style-sheet text for the light and dark
  themes.
- No sound files are bundled. `Notifications` passes the name of the chosen
  sound file (`Alarm02.wav` or `tada.wav`) to a player function. The default
  player only rings the terminal bell. Pass your own `player` to
  `Notifications` or `App` to play real audio.
- Nothing runs in the background. A countdown advances only while
  `impomo run` is running, or when your code calls `Timer.tick()`.

## Running the tests

```
pip install ".[test]"
pytest
```