# charsheet5e

A plain-Python model of a fifth edition character sheet. It has the rules, parsers and state handling needed to keep a sheet up to date. It depends only on the standard library.

## Modules

- `charsheet5e.rules`: `proficiency_bonus_for(level)` gives the proficiency bonus for a total level. `modifier(score, proficiency, expertise, proficiency_bonus)` gives an ability or skill modifier. Expertise doubles the bonus, but only together with proficiency.
- `charsheet5e.character`: `CharacterState` holds ability scores, skills, class levels, senses, conditions, hit points, armour class and speeds. Its parts are:
  - the enums `AbilityScoreType` and `SkillType`;
  - the dataclasses `AbilityScore`, `Skill`, `Level`, `Sense` and `Condition`;
  - `new_character()`, which builds a blank level 1 character;
  - `CharacterState.serialize()` and `deserialize_character(text)`, which give a JSON round trip. `deserialize_character` raises `ValueError` on bad input.
- `charsheet5e.commands`: functions that change an `AppData`:
  - `set_proficiency_bonus`, `recalc_overall_level`, `set_ability_score`;
  - `delete_level`, `delete_sense`, `delete_condition`;
  - `update_from_conditions`, `switch_to_character`, `switch_to_sources`.

  It also has `Delegate`, which saves and opens character files. `Delegate.save` returns `False` when no path is known yet; use `save_as` in that case.
- `charsheet5e.app_state`: `AppData` holds the character, the loaded sources, the settings and the UI state. The UI state includes a navigation stack of `NavState` values, handled by `add_view`, `pop_view`, `current_view` and `view_count`. The module also has the selection helpers of a content browser:
  - `sources_view` and `set_sources_view`;
  - `selected_source_content` and `set_selected_source_content`;
  - `selected_source_content_items` and `set_selected_source_content_items`;
  - `selected_source_content_item` and `set_selected_source_content_item`.
- `charsheet5e.content`:
  - the content types `Armour`, `Feat`, `SourceContentCollection`, `InternalSource`, `SourceCategory`, `SourceContentType`, `Rarity` and `ArmourCategory`;
  - `armour_from_record` and `feat_from_record`, which build content from JSON records;
  - `srd_source(armour_json, feats_json)`, which builds a System Reference Document source from JSON text;
  - `get_sources(srd)`, which lists that source followed by sample sources.
- `charsheet5e.money`: `parse_money("100 gp")` returns a `Money` value with `cp`, `sp`, `ep`, `gp` and `pp`.
- `charsheet5e.dice`: `parse_dice("2d6")` returns a `DiceExpr` whose `terms` are `Roll(num_rolls, dice_sides)` values. It raises `DiceParseError` on an unreadable count.
- `charsheet5e.stat_modifier`: `StatModifier` applies modifiers as `(initial + base) * multiplier + flat`. Each modifier is tagged with its source, so it can be removed again. `StatWithModifiers` pairs a base value with its modifiers.
- `charsheet5e.attributes`: `ValueAttribute` holds a typed numeric value. `Identifier` names a stat, and `PlayerCharacter` keys its stats by identifier. `new_5e_character()` builds a character with its starting ability scores.
- `charsheet5e.index_or`: `index_or(container, index)` and `IndexOr` read items from sequences and mappings, and give `None` when nothing is there.
- `charsheet5e.formatter`: `NumberFormatter` formats numbers with an optional unit and parses them back. It raises `ValidationError` on bad text.
- `charsheet5e.theme`: `Color`, `Insets` and `config_env_defaults(env)`, which fills a mapping with the default theme values. The mapping must already hold `TEXTBOX_BORDER_RADIUS`.

## Example

```python
from charsheet5e.app_state import AppData
from charsheet5e.character import AbilityScoreType, Level, deserialize_character
from charsheet5e.commands import recalc_overall_level, set_ability_score
from charsheet5e.rules import modifier

data = AppData()                                  # holds a blank level 1 character
data.character.levels.append(Level.create("Wizard", 4))
recalc_overall_level(data)                        # level 5, proficiency bonus 3
set_ability_score(data, AbilityScoreType.INTELLIGENCE, 16)

text = data.character.serialize()
restored = deserialize_character(text)

print(modifier(16, True, False, restored.proficiency_bonus))  # 6
```

## What it does not do

- It has no graphical interface and no command-line program. It is a library for building one.
- It ships no content data. `srd_source` needs the armour and feat JSON text from the caller, and `get_sources` needs the resulting source.
- `parse_dice` only reads dice rolls out of an expression. It does not roll dice, and it does not keep variables or constants.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```