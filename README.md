# tamapet

A small virtual pet simulation together with the pieces needed to draw it on a
128×64 monochrome display: a packed bit array, a pixel canvas, a moving-sum
filter, a debounced logical button and a handful of UI widgets.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The pet

`tamapet.pet.Tamagotchi` is a dataclass holding `health`, `energy`,
`satiety`, `happiness`, `temperature`, `brightness` and `time` (seconds of
the in-game clock, starting at 12:30). `step(event)` advances one second and
applies the rules: a `ButtonEvent.CLICK` feeds the pet, a `ButtonEvent.HOLD`
makes it fully happy; every ten seconds it gets hungrier, takes damage when
starving or when the temperature is outside 20–25, spends or recovers energy
depending on the light and the time of day, and turns happiness into
healing. A dead pet (health 0) no longer changes.

`apply_readings(temperature, brightness_raw)` stores sensor values: the
temperature is clamped to 5–45 and the raw 12-bit brightness (0–4095, other
values raise `ValueError`) is scaled to 0–255.

```python
from tamapet.button import ButtonEvent
from tamapet.pet import Tamagotchi

pet = Tamagotchi()
pet.apply_readings(temperature=22, brightness_raw=3000)
pet.step(ButtonEvent.CLICK)   # feeds the pet
pet.step(ButtonEvent.HOLD)    # makes it happy
print(pet.clock_hours(), pet.clock_minutes(), pet.health, pet.satiety)
```

The individual rules (`feed`, `hunger`, `damage_hungry`,
`damage_temperature`, `calc_energy`, `happiness_to_healing`, `damage`,
`heal`, `use_energy`, `recover_energy`) and the state checks (`is_dead`,
`is_hungry`, `is_hot`, `is_cold`, `is_sleep_time`, `is_awake_time`,
`is_too_bright`, `is_too_dark`) are public methods as well.

## Input

`tamapet.button.LogicalButton` turns raw, noisy per-tick pin readings into
`ButtonEvent.CLICK` (released before 30 ticks of pressing) or
`ButtonEvent.HOLD` (reported once, on the 30th tick of pressing), smoothing
them over the last 8 readings with `tamapet.smoothing.MovingSumFilter`.

```python
from tamapet.button import ButtonEvent, LogicalButton

button = LogicalButton()
events = [button.tick(pressed) for pressed in [True] * 10 + [False] * 10]
assert ButtonEvent.CLICK in events
```

## Drawing

`tamapet.bitarray.BitArray` is a fixed-size array of bits packed into bytes.
`tamapet.canvas.Canvas` is a pixel grid on top of it, addressed as
`canvas[y, x]`, with vertical or horizontal byte layout
(`tamapet.canvas.Orientation`), and with `draw`, `fill_rectangle` and
`draw_rectangle`, all clipped to its edges. Widgets in `tamapet.ui` and
`tamapet.elements` draw themselves onto it:

- `tamapet.ui.drawable.Drawable` and `AbstractDrawable` – the base classes
  (position `y`, `x` and a `visible` flag)
- `tamapet.ui.screen.Screen` – the 64×128 display buffer and its list of widgets
- `tamapet.ui.container.Container` – draws all its children;
  `tamapet.ui.container.Tabs` – draws only the child at `index`
- `tamapet.ui.image.Image` – a bitmap `icon`, optionally `inverted`
- `tamapet.ui.bars.ProgressBar` (`progress`) and
  `tamapet.ui.bars.IndicatorBar` (`indicator`, `lvl_1`, `lvl_2`) – gauges
  whose values are limited to 0–255
- `tamapet.elements.MetricProgress`, `tamapet.elements.MetricIndicator` –
  an 8×8 icon above a bar; `tamapet.elements.IconBar` – a row of icons of
  which `set_progress` shows a proportional prefix

```python
from tamapet.ui.bars import ProgressBar
from tamapet.ui.screen import Screen

screen = Screen()
screen.drawables.push_back(ProgressBar(0, 0, 54, 8))
screen.redraw()
frame = screen.raw_data()   # packed bytes of the 64×128 canvas
```

Widgets are linked into lists intrusively (`tamapet.intrusive_list`), so a
widget belongs to at most one list at a time; adding it elsewhere moves it.

## What it does not do

The package is a library only: it has no command and no main loop. It does
not read sensors or buttons and does not talk to a display; the caller
supplies readings to `Tamagotchi.apply_readings`, raw pin states to
`LogicalButton.tick`, and sends `Screen.raw_data()` wherever it is needed.
It ships no icon artwork and no ready-made status panel or clock widget;
icons are `Canvas` objects the caller builds.