from runeplan.catalog import CatalogGoal, SkillRequirement
from runeplan.goal import Goal
from runeplan.skill import XP, Level, Skill
from runeplan.thresholds import aggregate_thresholds


def _catalog(*reqs):
    return CatalogGoal(
        skill_reqs=[SkillRequirement(skill=s, level=Level(lvl)) for s, lvl in reqs]
    )


def test_max_per_skill():
    goals = [Goal(rsn_id="r1"), Goal(rsn_id="r1")]
    catalog_goals = [
        _catalog((Skill.AGILITY, 60)),
        _catalog((Skill.AGILITY, 70), (Skill.MAGIC, 55)),
    ]
    current = {Skill.AGILITY: XP(302288)}  # level 61

    thresholds = aggregate_thresholds(goals, catalog_goals, current)

    agility = thresholds[Skill.AGILITY]
    assert agility.required.value == 70
    assert agility.satisfied is False
    assert agility.current.value == 61
    assert thresholds[Skill.MAGIC].required.value == 55


def test_completed_goals_are_excluded():
    goals = [Goal(completed=True), Goal()]
    catalog_goals = [_catalog((Skill.AGILITY, 99)), _catalog((Skill.AGILITY, 50))]
    thresholds = aggregate_thresholds(goals, catalog_goals, {})
    assert thresholds[Skill.AGILITY].required.value == 50


def test_missing_current_xp_counts_as_zero():
    thresholds = aggregate_thresholds([Goal()], [_catalog((Skill.MAGIC, 2))], {})
    magic = thresholds[Skill.MAGIC]
    assert magic.current.value == 1
    assert magic.current_xp == XP(0)
    assert magic.xp_needed == 83
    assert magic.satisfied is False


def test_satisfied_when_xp_reaches_requirement():
    thresholds = aggregate_thresholds(
        [Goal()], [_catalog((Skill.MAGIC, 50))], {Skill.MAGIC: XP(101_333)}
    )
    assert thresholds[Skill.MAGIC].xp_needed == 0
    assert thresholds[Skill.MAGIC].satisfied is True


def test_goals_without_catalog_partner_are_ignored():
    thresholds = aggregate_thresholds([Goal(), Goal()], [_catalog((Skill.ATTACK, 10))], {})
    assert list(thresholds) == [Skill.ATTACK]


def test_none_catalog_entry_is_ignored():
    assert aggregate_thresholds([Goal()], [None], {}) == {}