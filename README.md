# huaweiwall

Building blocks for an interactive display wall. The package has these parts:

- game states and a manager that holds the current state
- helpers for an interaction state that track which texts are showing and
  which seats are free
- a loader for configuration and sentence files in a project's `data/`
  directory
- a client that fetches entries from a web service and acknowledges them

The package uses only the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`.

## `huaweiwall.fsm`

- `GameState` is an enum with the members `INTRO`, `INTERACTION` and `ENDING`.
- `FSMManager(current_state=GameState.INTRO)` holds the `current_state`.
  Calling `begin_play()` sets it back to `GameState.INTRO`.
- `BaseState` is the base class for state actors. `begin_play(actors)` takes
  an iterable of scene objects and stores the first `FSMManager` it finds in
  `fsm_manager`. If there is none, `fsm_manager` is `None`. In both cases the
  result is logged as a warning.
- `IntroState` and `EndingState` are `BaseState` subclasses that add no
  behaviour of their own.

## `huaweiwall.interaction`

`InteractionState(rng=None)` is a `BaseState`. You can pass it a
`random.Random` so that seat choice is reproducible. It has these members:

- `shower_text_id_array` is the list of text ids that are showing.
- `check_id_is_showing(text_id)` returns the position of `text_id` in
  `shower_text_id_array`. It returns `-1` if the id is not in the list.
- `ui_text_toggle_track_array` is the list that tracks toggle state.
- `init_ui_text_toggle_track_array(count)` sets that list to `count` pairs,
  each `[1, 1]`. A negative `count` raises `ValueError`.
- `get_random_unused_seat(animate_array)` returns a random index whose flag is
  false. If every flag is true, it raises `ValueError`.

```python
import random

from huaweiwall.interaction import InteractionState

state = InteractionState(rng=random.Random(1))
state.shower_text_id_array = [4, 7, 9]
assert state.check_id_is_showing(7) == 1
assert state.check_id_is_showing(3) == -1

seat = state.get_random_unused_seat([True, False, True, False])
assert seat in (1, 3)
```

## `huaweiwall.data`

`DataManager(project_dir=None)` reads from `<project_dir>/data`. The data
directory is also available as the `data_dir` property. If you do not give
`project_dir`, it defaults to the current working directory.

`load_data()` reads three files:

- `api.txt` is a JSON object. Each string value is added to `api_map` under
  its key. Number and boolean values are stored in their string form. Other
  values are ignored.
- `common.txt` is a JSON object. Its `width` and `height` fields set
  `window_width` and `window_height`. A field that is missing or is not a
  number gives `0`.
- `sentence.txt` holds one sentence per line. Empty lines are dropped. Each
  literal `\n` in a line is replaced with a real line break. The result is
  stored in `sentences`.

A missing or unreadable file is logged and skipped, and no exception is
raised. Content that is not a JSON object is ignored.

`get_api(key)` returns the link stored under `key`. If there is no link for
that key, it returns `""`.

## `huaweiwall.api`

`APIManager(get_data_link="", post_data_link="", opener=None)` keeps two
queues, `id_array` and `path_array`. By default it sends requests with
`urllib.request.urlopen`. You can pass any callable as `opener` if it takes a
`urllib.request.Request` and returns a context manager with a `read()` method.

- `get_sentence_data()` sends a GET request to `get_data_link` and passes the
  body to `load_json_data`. It does nothing if the link is empty.
- `load_json_data(json_content)` expects a JSON array of objects that have
  `id` and `path` fields. The first `len(path_array)` records are taken to be
  known already and are skipped. For each later record that is an object, its
  `id` and `path` are appended to the queues. A field that is missing is
  appended as `""`. Input that is not a JSON array is logged as an error and
  ignored.
- `post_id_data()` removes the oldest id from `id_array` and POSTs an empty
  body to `post_data_link + id` with `Content-Type: application/json`. It does
  nothing if the link is empty or no ids are queued.

Requests are synchronous. A request that fails is logged and no exception is
raised. The body of an HTTP error response is logged as the response.

## What the package does not do

- It has no command-line program.
- It does not render anything, and it does not manage windows. The window
  size that `DataManager` loads is only stored.
- `FSMManager` only holds the current state. It does not move between states
  on its own, and it does not create or destroy state objects.

## Running the tests

```
pytest
```