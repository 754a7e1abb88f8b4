# atmtui

Building blocks for a terminal dashboard that watches Claude Code agent
sessions running in tmux panes.

## Modules

- `atmtui.daemon`: finds the monitoring daemon through its PID file
  (`pid_file_path`, `read_pid`, `is_daemon_running`). It can also start the
  daemon: `spawn_daemon` runs `atmd start -d` detached, and
  `ensure_daemon_running` starts it when it is not running. It then waits up
  to three seconds and raises `DaemonStartError` on failure.
- `atmtui.tmux`: `is_in_tmux` tells you whether the `TMUX` environment
  variable is set. `jump_to_pane` switches the tmux client to the session,
  window and pane of a pane id such as `%5`. Failures raise `NotInTmuxError`,
  `InvalidPaneIdError` or `CommandFailedError`, all subclasses of
  `TmuxError`.
- `atmtui.input`: key events (`KeyEvent`, `KeyCode`), interface events
  (`KeyPressed`, `Resize`, `SessionUpdate`, `SessionListReplace`,
  `DaemonDisconnected`, `SessionRemoved`, `DiscoveryComplete`) and
  `handle_key_event`. It turns a key press into an `Action`:
  - `q`, `Q`, `Esc` and `Ctrl+C` quit.
  - `j`/Down and `k`/Up move the selection.
  - `Enter` jumps to the selected session.
  - `r`/`R` ask for a refresh.
  `handle_key_event` works with any application object that provides
  `quit`, `select_next`, `select_previous` and `selected_session`.
- `atmtui.theme`: session statuses (`SessionStatus`), colours (`Color`),
  styles (`Style`) and styled text (`Span`). It also provides the shared
  helpers `context_color`, `status_color`, `status_icon` and
  `status_background`.
- `atmtui.layout`: `split_layout` divides a `Rect` into a 3-line header, a
  session list (30%) and a detail panel (70%), and a 3-line footer.
- `atmtui.detail_panel`: `build_progress_bar`, `detail_border_color` and
  `build_detail_lines` for the selected session.
- `atmtui.session_list`: list rows (`session_item`), row backgrounds
  (`row_background_style`), `truncate_string`, and the message shown when
  there are no sessions (`empty_state`).
- `atmtui.status_bar`: `ConnectionState`, the header status text and border
  (`get_status_display`, `header_border_style`), the summary statistics
  (`format_stats`) and the footer key hints (`footer_hints`).
- `atmtui.errors`: `TuiError` and its subclasses. `TuiError.from_exception`
  wraps an `OSError` or a `json.JSONDecodeError`.

The session objects these functions take are any objects with the fields
they read, such as `status`, `context_percentage`, `context_critical`,
`id_short` and `model`.

## Example

```python
from atmtui.daemon import ensure_daemon_running
from atmtui.tmux import is_in_tmux, jump_to_pane
from atmtui.detail_panel import build_progress_bar

ensure_daemon_running()               # raises DaemonStartError on failure
print(build_progress_bar(50.0, 10))   # [=====     ] 50%
if is_in_tmux():
    jump_to_pane("%5")
```

## What this package does not do

It has no command and no full-screen program. It computes the text,
styles and layout of each panel, but it does not draw them to a terminal
and does not run an event loop. It does not talk to the daemon over its
socket. It does not install hooks into the Claude Code settings file.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```