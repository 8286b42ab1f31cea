import pytest

# Trimmed copy of a current AoN creature page
BARGHEST_HTML = """<html><head><title>Barghest - Monsters</title>
<script>var label = "Creature 99";</script></head><body>
<div id="main">
  <span><a href="Monsters.aspx">Monsters</a> | <a href="Traits.aspx">Traits</a></span>
  <hr/>
  <div id="ctl00_RadDrawer1_Content_MainContent_DetailedOutput">
    <h1 class="title"><a href="Monsters.aspx?ID=43">Barghest</a><span style="margin-left:auto; margin-right:0">Creature 4</span></h1>
    <span class="traituncommon"><a href="Traits.aspx?ID=159">Uncommon</a></span><span class="traitalignment"><a href="Traits.aspx?ID=90">CE</a></span><span class="traitsize"><a href="Traits.aspx?ID=160">Large</a></span><span class="trait"><a href="Traits.aspx?ID=14">Beast</a></span><span class="trait"><a href="Traits.aspx?ID=14">Beast</a></span><span class="trait"><a href="Traits.aspx?ID=68">Fiend</a></span>
    <br/>
    <b>Source</b> <a href="Sources.aspx?ID=1"><i>Bestiary pg. 34</i></a>
    <br/>
    <b>Perception</b> +12; darkvision, scent (imprecise) 30 feet
    <br/>
    <b>Languages</b> Abyssal, Common
    <hr/>
    <b>AC</b> 20; <b>Fort</b> +14, <b>Ref</b> +11, <b>Will</b> +9
    <br/>
    <b>HP</b> 75; <b>Weaknesses</b> good 5
    <hr/>
    <b>Speed</b> 35 feet
    <br/>
    <b>Melee</b> <span class="action" title="Single Action">[one-action]</span> jaws +14 [<a href="Traits.aspx?ID=105">+10/+6</a>] (magical, reach 10 feet), <b>Damage</b> 2d8+7 piercing plus 1d6 evil
    <br/>
    <b>Melee</b> <span class="action" title="Single Action">[one-action]</span> claw +14 [+10/+6] (agile, magical), <b>Damage</b> 2d6+7 slashing plus 1d6 evil
    <br/>
    <b>Melee</b> <span class="action" title="Single Action">[one-action]</span> Claw +12 (agile), <b>Damage</b> 2d6+5 slashing
  </div>
</div>
</body></html>"""

# The same page as the text mirror renders it
BARGHEST_TEXT = """Title: Barghest - Monsters - Archives of Nethys: Pathfinder 2nd Edition Database

URL Source: http://2e.aonprd.com/Monsters.aspx?ID=43

Markdown Content:
# Barghest (Creature 4)

Traits: Uncommon, CE, Large, Beast, Beast, Fiend

**Source** Bestiary pg. 34

**Perception** +12; darkvision, scent (imprecise) 30 feet

**AC** 20; **Fort** +14, **Ref** +11, **Will** +9

**HP** 75; **Weaknesses** good 5

**Speed** 35 feet

**Melee** [one-action] jaws +14 [+10/+6] (magical, reach 10 feet), **Damage** 2d8+7 piercing plus 1d6 evil

**Melee** [one-action] claw +14 [+10/+6] (agile, magical), **Damage** 2d6+7 slashing plus 1d6 evil
"""


@pytest.fixture
def barghest_html():
    return BARGHEST_HTML


@pytest.fixture
def barghest_text():
    return BARGHEST_TEXT
