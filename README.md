# everest

A small phone simulated in the terminal. When it starts, the phone prints a banner and clears the screen to a blue background. It then shows a status bar with the clock and "NO SERVICE", and a main menu that leads to a handful of built-in apps.

## Running

```
everest
```

The phone reads single keypresses straight from the terminal, without echo. It needs a POSIX terminal. After the banner it waits five seconds before the menu appears.

## Keys

On the main menu:

| Key | App            |
|-----|----------------|
| `r` | Call History   |
| `d` | Dialer         |
| `m` | Messages       |
| `c` | Calculator     |
| `s` | Settings       |
| `k` | Contacts       |
| `q` | Power Off      |

Any other key is echoed as `[EVEREST] You've pressed a key :<key>`. Inside an app, press `b` or `B` to go back to the menu. At most 16 pending keypresses are queued. Keys pressed beyond that are dropped.

## Apps

- **Calculator**: asks for two numbers and then an operation, and prints the result with six decimals. The operations are 1 sum, 2 divide, 3 multiply and 4 subtract. Option 9 leaves without a result. Any other choice gives 0. Dividing by zero, or input that is not a number, gives no result. The result stays on screen for five seconds.
- **Dialer**: asks for a number, keeps its first 17 characters and tries to dial it. The phone never has cellular service, so dialing always reports "Cannot dial this number / Service not found".
- **Messages, Contacts, Call History, Settings**: these show their empty screens. Once Messages has been left with `b`, it no longer opens for the rest of the session.

## Library use

The pieces can also be driven from code:

- `everest.kernel.Kernel(device, out, read_line)` is the phone. `boot()` draws the start screen and opens the menu. `handle_key(key)` reacts to one key. `run_current_app()` runs the selected app and returns to the menu. `watch()` loops until `q` is pressed. `everest.kernel.main()` is the `everest` command.
- `everest.io.KeyBuffer` is a bounded first-in, first-out queue of keys, 16 by default. `push` returns `False` when a key is dropped, and `pop` raises `IndexError` when the queue is empty. `everest.io.InputDevice` feeds it from a stream. Its `update()` moves at most one key into the queue. Its `get_keypress()` returns the oldest key, or `None`. `kbhit` and `getch` poll and read single keys.
- `everest.display` writes the terminal control sequences through `draw_top_ui`, `reset`, `init_graphics` and `app_init`.
- `everest.apps` holds each app's screen and loop. `everest.apps.calculate(x, y, op)` performs one calculator operation.
- `everest.storage.fswrite(filename, data)` appends one 2048-byte record to a file. The record is padded with NUL bytes or cut to length. `everest.storage.fsopen(filename)` reads the first record back. Both raise `OSError` when the file cannot be opened.

## What it does not do

The phone cannot place calls or send messages. It keeps no contacts, messages or call history, so those apps never show any entries. The settings screen has no settings. The storage functions exist, but no app uses them.