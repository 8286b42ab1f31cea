"""Tests for attack scanning and duplicate merging."""

from aonprd.attacks import (
    DETAILED_ATTACK,
    RELAXED_ATTACK,
    extract_attacks,
    coalesce_attacks,
    scan_attacks,
)


def attack(name, bonus, damage=None):
    return {'name': name, 'attack': bonus, 'damage': damage}


class TestPatterns:
    def test_detailed_groups(self):
        m = DETAILED_ATTACK.search("Melee claw +18 (2d8+9 piercing)")
        assert m.groups() == ("Melee", "claw", "+18", "2d8+9 piercing")

    def test_detailed_skips_text_before_damage(self):
        m = DETAILED_ATTACK.search("Ranged longbow +12 +8/+4 (range 100 feet)")
        assert m.group(2) == "longbow"
        assert m.group(4) == "range 100 feet"

    def test_detailed_needs_parenthesis_on_line(self):
        assert DETAILED_ATTACK.search("Melee claw +18\n(2d8)") is None

    def test_relaxed_groups(self):
        m = RELAXED_ATTACK.search("Ranged shortbow +9, Damage 1d6")
        assert m.groups() == ("Ranged", "shortbow", "+9")


class TestScanAttacks:
    def test_action_glyphs_removed(self):
        attacks = scan_attacks(
            ["Melee [one-action] jaws +14 [+10/+6] (magical), Damage 2d8+7"],
            DETAILED_ATTACK, True)
        assert attacks == [attack("jaws", "+14", "magical")]

    def test_markdown_bold_removed(self):
        attacks = scan_attacks(["**Melee** ◆ fist +6 (agile)"], DETAILED_ATTACK, True)
        assert attacks == [attack("fist", "+6", "agile")]

    def test_multi_word_name(self):
        attacks = scan_attacks(["Melee  tail   lash +9 (reach 15 feet)"], DETAILED_ATTACK, True)
        assert attacks[0]['name'] == "tail lash"

    def test_relaxed_has_no_damage(self):
        attacks = scan_attacks(["Ranged dart +7"], RELAXED_ATTACK, False)
        assert attacks == [attack("dart", "+7")]


class TestExtractAttacks:
    def test_detailed_phase(self):
        blocks = ["Melee claw +18 (2d8+9 piercing)\nRanged spine +15 (1d10 piercing)"]
        assert extract_attacks(blocks) == [
            attack("claw", "+18", "2d8+9 piercing"),
            attack("spine", "+15", "1d10 piercing"),
        ]

    def test_relaxed_only_when_detailed_finds_nothing(self):
        blocks = ["Melee claw +18", "Ranged spine +15 (1d10)"]
        assert extract_attacks(blocks) == [attack("spine", "+15", "1d10")]

    def test_relaxed_fallback(self):
        assert extract_attacks(["Melee claw +18, Damage 2d8"]) == [attack("claw", "+18")]

    def test_typographic_minus(self):
        assert extract_attacks(["Melee fist −5 (1d4 bludgeoning)"]) == [
            attack("fist", "-5", "1d4 bludgeoning")]

    def test_none(self):
        assert extract_attacks(["Speed 25 feet"]) == []
        assert extract_attacks([]) == []

    def test_duplicates_merged(self):
        blocks = [
            "Melee claw +12 (2d8+9 piercing)",
            "Melee claw +18 (2d8+9 piercing)",
        ]
        assert extract_attacks(blocks) == [attack("claw", "+18", "2d8+9 piercing")]


class TestCoalesceAttacks:
    def test_keeps_higher_bonus(self):
        attacks = [attack("claw", "+18", "a"), attack("claw", "+12", "b")]
        assert coalesce_attacks(attacks) == [attack("claw", "+18", "a")]

    def test_later_higher_bonus_wins(self):
        attacks = [attack("claw", "+12", "a"), attack("claw", "+18", "b")]
        assert coalesce_attacks(attacks) == [attack("claw", "+18", "b")]

    def test_tie_keeps_first(self):
        attacks = [attack("Claw", "+14", "first"), attack("claw", "+14", "second")]
        assert coalesce_attacks(attacks) == [attack("Claw", "+14", "first")]

    def test_case_insensitive_names(self):
        attacks = [attack("Jaws", "+2"), attack("JAWS", "+3"), attack("jaws", "+1")]
        result = coalesce_attacks(attacks)
        assert len(result) == 1
        assert result[0]['attack'] == "+3"

    def test_negative_bonuses(self):
        attacks = [attack("fist", "-5"), attack("fist", "-1")]
        assert coalesce_attacks(attacks) == [attack("fist", "-1")]

    def test_first_encounter_order(self):
        attacks = [attack("jaws", "+5"), attack("claw", "+4"), attack("jaws", "+9")]
        assert [a['name'] for a in coalesce_attacks(attacks)] == ["jaws", "claw"]
        assert coalesce_attacks(attacks)[0]['attack'] == "+9"


class TestMirrorText:
    def test_markdown_links(self):
        blocks = [
            "**Melee** [one-action] [jaws](https://2e.aonprd.com/Weapons.aspx?ID=1) +14 "
            "([magical](https://2e.aonprd.com/Traits.aspx?ID=103), reach 10 feet), "
            "**Damage** 2d8+7"]
        assert extract_attacks(blocks) == [attack("jaws", "+14", "magical, reach 10 feet")]

    def test_non_ascii_digits_ignored(self):
        assert extract_attacks(["Melee jaws +５ (1d4)"]) == []
