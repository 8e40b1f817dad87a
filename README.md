# llmquota

`llmquota` keeps track of the rolling usage windows that LLM coding assistants
enforce (a five-hour window, a seven-day window and a seven-day Sonnet window)
and turns the readings into something you can act on:

- a bounded per-window history of change-points, persisted as JSON;
- a burn rate in percent per hour, measured over a 45-minute lookback or
  derived from the window average;
- a forecast that says whether a window will run out before it resets
  (`full in 1h 30m`) or where it will land (`~60% by reset`);
- block-character sparklines;
- building blocks for a terminal dashboard: a state model, gradient progress
  bars with a pace marker, a colour ramp, a title band, provider group
  headers, cost clusters, freshness text and a footer of key hints.

## Trend data

```python
from datetime import datetime, timedelta, timezone

from llmquota.forecast import compute_forecast, short_duration
from llmquota.history import History, Product, Sample, WindowKind, key
from llmquota.rate import RATE_LOOKBACK, rate, window_duration
from llmquota.sparkline import sparkline
from llmquota.store import Store

now = datetime(2026, 5, 26, 12, 0, tzinfo=timezone.utc)
resets_at = now + timedelta(hours=2)

forecast = compute_forecast(40, 40, now, resets_at)
print(forecast.at_risk, forecast.arrow, forecast.status)  # True ↑ full in 1h 30m
print(short_duration(2.25))                                # 2h 15m

slot = key(Product.CLAUDE, WindowKind.FIVE_HOUR)           # "claude:five_hour"
history = History()
history.append(slot, Sample(captured_at=now, used_pct=10, resets_at=resets_at))
history.append(slot, Sample(captured_at=now + timedelta(minutes=10),
                            used_pct=25, resets_at=resets_at))
samples = history.epoch_samples(slot, resets_at)

window_start = resets_at - window_duration(WindowKind.FIVE_HOUR)
per_hour, measured = rate(samples, now + timedelta(minutes=10), RATE_LOOKBACK, window_start)
print(sparkline(samples, 6))

store = Store("history.json")
store.save(history)
restored = store.load()
```

- `History.append` ignores a reading whose percentage and reset time match
  the last one, drops points from a previous reset epoch and keeps at most
  64 points per window.
- `rate` returns `(percent_per_hour, measured)`. `measured` is true when a
  sample at least `lookback` old was available as a baseline; otherwise the
  latest percentage is divided by the hours elapsed since `window_start`.
  Negative rates are clamped to zero.
- `elapsed_fraction(kind, resets_at, now)` gives how far through its window
  `now` is, clamped to [0, 1].
- `sparkline(samples, width)` renders the last `width` samples and pads on
  the left so the result is always `width` characters.
- `Store.load` never raises: a missing, unreadable, malformed or
  unknown-version file gives an empty `History`. `Store.save` creates the
  parent directory and writes through a temporary file that is then renamed
  into place. Times are stored as whole Unix seconds.

## Dashboard pieces

`llmquota.model.Model` holds the dashboard state:

```python
from llmquota.model import Model, WindowCost
from llmquota.prefs import DisplayPrefs, Visibility
from llmquota.history import Product, WindowKind

model = Model(
    prefs=DisplayPrefs(visibility=Visibility.BOTH),
    costs={Product.CLAUDE: {WindowKind.FIVE_HOUR: WindowCost(amount=3.2)}},
    store=Store("history.json"),
)
model.width = 80
```

Its keyword arguments are `claude_reader`, `codex_reader` (objects with a
`fetch(now)` method, see `SourceReader`), `claude_cost`, `codex_cost`
(objects with `window_costs(now, windows)`, see `CostReader`), `costs`,
`clock`, `refresh_every` (default 30 seconds), `claude_hook_installed`,
`prefs` and `store`. With a store, the history is loaded from it. The model
keeps per-provider `windows` and `errors` (`SourceError` with an
`ErrorCategory`), one spring-animated `BarAnim` per row in `QUOTA_ROW_SPECS`,
and `cost_active()` / `glyphs()` helpers. `Spring.update(pos, vel, target)`
steps a damped spring by one frame.

Display preferences: `Visibility.next()` cycles both → Claude only → Codex
only, `Visibility.shows(product)` filters providers, and `DisplayPrefs` has
`hide_trend`, `hide_cost` and `icons` (Nerd Font glyphs from
`llmquota.glyphs.glyphs_for(True)`; the default set is plain Unicode).

Rendering helpers, all returning strings with ANSI colour:

- `llmquota.chrome`: `render_title_band(width, now, glyphs)`,
  `render_group_header(model, product, label, now, width)`,
  `render_footer(model, inner_width)` with key hints or recovery hints such
  as `Claude: run install-claude-hook`, and `append_hint_within_width`.
- `llmquota.cost_view`: `format_value(cost)` (`$3.20`, `~$0.90`, `$3.20*`,
  `~$1.2k*`), `value_cluster(model, product)` (`5h $3.20 · 7d $47.50`) and
  `render_freshness_line(model, now, width)`.
- `llmquota.freshness`: `source_freshness`, `source_is_stale`,
  `group_freshness_text` (`updated 2:14 PM · 3m ago`) and `age_text`.
- `llmquota.bars`: `render_gradient_bar(fraction, width)`,
  `paced_bar(fraction, width, even_use)`, `overlay_even_use_tick`,
  `replace_cell_at`, `pulse_color(phase)` and `progress_fraction`.
- `llmquota.colors`: the palette, an sRGB `Color` with HCL blending and Lab
  distance, `ramp_color(f)` (green → amber → red) and `threshold_color`.
- `llmquota.style`: `Style.render`, `display_width`, `strip_ansi` and
  `format_cell(value, width, align_right)`.

## What this package does not do

It does not read quota data from any provider: nothing here calls a
`SourceReader` or `CostReader`, so you bring and call your own. It does not
draw the per-window quota rows or assemble a complete screen, it does not
handle key presses, refresh timers or animation ticks, and it has no
command to run. It supplies the state model and the pieces listed above.

## Tests

Install the `test` extra and run `pytest` from the project root.