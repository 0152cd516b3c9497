# runeplan

A library for planning goals on Old School RuneScape accounts. It provides:

- **Skill arithmetic** – the experience table for levels 1–126 (including
  virtual levels), validated `XP` and `Level` value objects, and the
  experience formula the table is built from.
- **Goals** – a catalog of canonical goals and per-account activated goals
  with requirement checklists.
- **Skill thresholds** – the highest level each skill needs across an
  account's incomplete goals, compared with its current experience.
- **Hiscores** – a client for the hiscores CSV endpoint and a service that
  fetches and stores an account's experience.
- **HTML views and request handlers** – pages and fragments for browsing the
  catalog, a catalog goal's detail page, the planner and the skills grid,
  built on Werkzeug.

## Skills and experience

```python
from runeplan.skill import Level, XP, level_for_xp, xp_range_for_level, xp_for_level_formula

level_for_xp(13_034_431)     # 99
level_for_xp(200_000_000)    # 126, the highest tracked virtual level
level_for_xp(-5)             # 1: negative XP counts as 0
xp_range_for_level(1)        # (0, 82)
xp_range_for_level(126)      # (188884740, 200000000)
xp_for_level_formula(92)     # 6517253

XP(302_288).to_level()                 # Level(value=61)
XP(100).xp_remaining(Level(10))        # 1054
Level(99).to_xp()                      # XP(value=13034431)
```

`Skill` is a string enum of the 24 skills, in canonical order (also available
as `ALL_SKILLS`); `is_valid_skill(name)` checks a name. `XP` raises
`InvalidXPError` for negative values, and `Level` and `xp_range_for_level`
raise `InvalidLevelError` for levels outside 1–126.

## Goals and thresholds

`runeplan.goal` defines `GoalType` (quest, diary, skill, boss_kc, item,
custom), `is_valid_goal_type`, `Goal` (with `complete(at)`),
`RequirementProgress`, `CustomRequirement`, and `SkillThreshold`, built with
`new_skill_level_threshold(skill, level)`.

`runeplan.catalog` defines `CatalogGoal`, `CatalogRequirement`,
`SkillRequirement`, `ItemRequirement` and `BossRequirement`.

`runeplan.thresholds.aggregate_thresholds(goals, catalog_goals, current)`
pairs each goal with the catalog goal at the same position, skips completed
goals and missing catalog goals, and returns one `Threshold` per required
skill: the level required, the current level and XP, the XP still needed and
whether it is satisfied. Skills missing from `current` count as 0 XP.

## Accounts

`runeplan.user` defines `User` (with `active_rsn()`, the first linked
account) and `RSN`. `set_user(context, user)` returns a copy of a mapping
carrying the user, and `get_user(context)` reads it back, or returns `None`.

## Services

The services wrap repositories you supply, so any storage can sit behind
them:

- `CatalogService` (`runeplan.catalog_service`) – `list_all()`,
  `list_by_type(goal_type)`, `get_by_id(goal_id)`. Repositories raise
  `CatalogNotFoundError` for a missing goal.
- `GoalService` (`runeplan.goal_service`) – `list(rsn_id)`,
  `activate(rsn_id, catalog_id)`, `complete(goal_id)`,
  `toggle_requirement(goal_id, requirement_id)`. Repositories raise
  `GoalNotFoundError` for a missing goal.
- `SyncService` (`runeplan.sync`) – `sync_hiscores(rsn_id, rsn_name)` fetches
  experience from a hiscores source, persists it through an `RSNRepository`
  and returns it, raising `SyncError` if either step fails.

`runeplan.hiscores.HiscoresClient(base_url, timeout=0)` requests
`<base_url>?player=<rsn>` (timeout defaults to 10 seconds) and its
`fetch(rsn)` raises `HiscoresError` on a network failure or a non-200
status. `parse_hiscores(lines)` maps `rank,level,xp` lines onto skills in the
hiscores' order, skipping malformed or negative lines.

## Views and handlers

`runeplan.templates` renders HTML strings: `layout.base(title, body)`,
`layout.error_panel(message)` and `layout.render(status, html)` (a Werkzeug
`Response`); `browse.browse`, `browse.goal_list`, `browse.goal_card`;
`detail.detail`; `goal.goal_card`, `goal.requirement_row`, `goal.planner`;
`skill.grid` and `skill.skill_row`.

`runeplan.handlers` builds handlers that take a Werkzeug `Request` plus route
values as keyword arguments (for example `id=...`) and return a `Response`:

- `handlers.catalog.browse_handler(service)` and
  `catalog_detail_handler(service)`;
- `handlers.goal.planner_handler`, `activate_goal_handler`,
  `complete_goal_handler` and `toggle_requirement_handler`, each taking a
  `GoalService`;
- `handlers.skill.skills_handler(goal_loader, catalog_loader)`.

Handlers that need the current account read it from the request's WSGI
environ with `get_user`, so place it there with `set_user`, for example
`Request(set_user(environ, user))`.

## Logging

`runeplan.logsetup.new_logger(env, level)` returns a `logging.Logger`: JSON
lines with sampling when `env` is `"production"`, coloured console lines with
caller information otherwise. Levels are `debug`, `info`, `warn`, `error`
(case-insensitive) or the matching `logging` constants; anything else raises
`InvalidLogLevelError`.

## What the package does not do

- It has no command and no server: routing the handlers to URLs and serving
  them is left to your WSGI application.
- It has no storage: repositories for catalog goals, goals and account skill
  data are yours to provide, and there is no database schema or migration.
- It has no authentication or request middleware, no profile page and no
  request handler for hiscores sync; `SyncService` is available to call
  directly.

## Tests

The test suite uses pytest and responses, listed in the `test` extra.