# robotkit

A small stopwatch timer that counts whole milliseconds on a monotonic clock,
plus a sleep helper that waits for a random time inside a range.

Everything lives in the `robotkit.timer` module: the `Timer` class and the
functions `sleep` and `cpu_time`.

## Installing

```
pip install robotkit
```

## Using the timer

```python
from robotkit.timer import Timer, sleep, cpu_time

t = Timer()
t.has_started()      # False: a new timer has not been started
t.elapsed()          # 0 while the timer is stopped
t.has_expired(500)   # True: a stopped timer counts as expired

t.start()
sleep(200)           # wait 200 ms
t.has_expired(100)   # True: more than 100 ms have passed
t()                  # same as t.elapsed(), about 200

t.restart()          # returns the elapsed time and starts counting again
t.reset()            # returns the elapsed time and stops the timer
```

- `start()` starts the timer from now, also when it is already running.
- `restart()` returns the milliseconds run so far (0 if the timer was
  stopped) and starts counting from now.
- `reset()` returns the milliseconds run so far (0 if the timer was stopped)
  and stops the timer.
- `has_expired(time)` is true when more than `time` milliseconds have
  elapsed, and always true for a stopped timer.

## Clock and sleeping

`cpu_time()` returns the current monotonic clock reading in whole
milliseconds.

`sleep(minimum, maximum=None)` waits a random number of milliseconds from
`minimum` up to but not including `maximum`. With only `minimum` given, or
when `maximum` is not above `minimum`, it waits exactly `minimum`
milliseconds. A negative duration returns at once without waiting.

## Comparing timers

Timers compare by start time. A timer that started earlier has run longer, so
it is the *greater* one. A stopped timer is less than any running timer, and
two stopped timers are equal. This keeps `t1 < t2` in line with
`t1() < t2()`. Timers are not hashable.

## Running the tests

```
pip install "robotkit[test]"
pytest
```