"""
Unit tests for YAML ship templates and generator ranges.
"""
import textwrap

import pytest

from fleet_battle.core.data import ShipClass, WeaponType
from fleet_battle.game.entities import (
    SHIP_TEMPLATES,
    create_ship,
    get_template,
    load_generator_ranges,
    load_ship_templates,
)


def write_yaml(tmp_path, content: str) -> str:
    path = tmp_path / "ships.yaml"
    path.write_text(textwrap.dedent(content))
    return str(path)


class TestBundledTemplates:
    """Test the templates shipped with the package."""

    def test_all_classes_present(self):
        assert set(SHIP_TEMPLATES) == set(ShipClass)

    @pytest.mark.parametrize("ship_class, name, hull, shield, speed, weapon_type, damage", [
        (ShipClass.FIGHTER, "Alpha", 60, 30, 180, WeaponType.LASER_CANNON, 25),
        (ShipClass.CRUISER, "Titan", 120, 100, 80, WeaponType.PLASMA_TURRET, 50),
        (ShipClass.BOMBER, "Thunder", 150, 60, 50, WeaponType.TORPEDO_BAY, 80),
    ])
    def test_template_values(self, ship_class, name, hull, shield, speed, weapon_type, damage):
        template = get_template(ship_class)

        assert template.name == name
        assert (template.hull, template.shield, template.speed) == (hull, shield, speed)
        assert template.weapon_type == weapon_type
        assert template.damage == damage

    def test_create_ship_full_strength(self):
        ship = create_ship(ShipClass.BOMBER, name="Heavy-1")

        assert ship.name == "Heavy-1"
        assert ship.ship_class == ShipClass.BOMBER
        assert ship.hull == ship.max_hull == 150
        assert ship.shield == ship.max_shield == 60
        assert ship.color == "Salmon"

    def test_created_ships_are_independent(self):
        first = create_ship(ShipClass.FIGHTER)
        second = create_ship(ShipClass.FIGHTER)

        first.weapon.damage = 1
        assert second.weapon.damage == 25

    def test_get_template_unknown(self):
        with pytest.raises(KeyError):
            get_template("DREADNOUGHT")  # type: ignore[arg-type]

    def test_bundled_generator_ranges(self):
        ranges = load_generator_ranges()

        assert ranges.hull == (50, 180)
        assert ranges.shield == (20, 120)
        assert ranges.speed == (30, 150)
        assert ranges.damage == (15, 75)
        assert len(ranges.names) == 10
        assert "Ravager" in ranges.names
        assert len(ranges.colors) == 6


class TestLoadShipTemplates:
    """Test template loading errors."""

    def test_custom_file(self, tmp_path):
        path = write_yaml(tmp_path, """
            ship_templates:
              FIGHTER:
                name: Dart
                hull: 40
                shield: 10
                speed: 200
                weapon: {type: ION_BEAM, damage: 12}
        """)

        templates = load_ship_templates(path)

        assert list(templates) == [ShipClass.FIGHTER]
        assert templates[ShipClass.FIGHTER].name == "Dart"
        assert templates[ShipClass.FIGHTER].color == "Gold"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Ship data file not found"):
            load_ship_templates(str(tmp_path / "nope.yaml"))

    def test_missing_key(self, tmp_path):
        path = write_yaml(tmp_path, """
            ship_templates:
              FIGHTER:
                name: Dart
                shield: 10
                speed: 200
                weapon: {type: ION_BEAM, damage: 12}
        """)

        with pytest.raises(KeyError, match="hull"):
            load_ship_templates(path)

    def test_unknown_class(self, tmp_path):
        path = write_yaml(tmp_path, """
            ship_templates:
              DREADNOUGHT:
                name: Big
                hull: 400
                shield: 10
                speed: 5
                weapon: {type: ION_BEAM, damage: 12}
        """)

        with pytest.raises(ValueError, match="DREADNOUGHT"):
            load_ship_templates(path)

    def test_unknown_weapon(self, tmp_path):
        path = write_yaml(tmp_path, """
            ship_templates:
              FIGHTER:
                name: Dart
                hull: 40
                shield: 10
                speed: 200
                weapon: {type: RAILGUN, damage: 12}
        """)

        with pytest.raises(ValueError, match="RAILGUN"):
            load_ship_templates(path)

    def test_not_a_mapping(self, tmp_path):
        path = write_yaml(tmp_path, "- just\n- a list\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_ship_templates(path)


class TestLoadGeneratorRanges:
    """Test generator range loading errors."""

    VALID = """
        fleet_generator:
          hull: [10, 20]
          shield: [0, 5]
          speed: [1, 2]
          damage: [3, 4]
          names: [Gnat]
          colors: [Grey]
    """

    def test_custom_file(self, tmp_path):
        ranges = load_generator_ranges(write_yaml(tmp_path, self.VALID))

        assert ranges.shield == (0, 5)
        assert ranges.names == ("Gnat",)

    def test_missing_section(self, tmp_path):
        with pytest.raises(KeyError, match="fleet_generator"):
            load_generator_ranges(write_yaml(tmp_path, "ship_templates: {}\n"))

    def test_empty_range(self, tmp_path):
        content = self.VALID.replace("hull: [10, 20]", "hull: [20, 20]")

        with pytest.raises(ValueError, match="hull"):
            load_generator_ranges(write_yaml(tmp_path, content))

    def test_negative_range(self, tmp_path):
        content = self.VALID.replace("damage: [3, 4]", "damage: [-3, 4]")

        with pytest.raises(ValueError, match="damage"):
            load_generator_ranges(write_yaml(tmp_path, content))

    def test_empty_pool(self, tmp_path):
        content = self.VALID.replace("names: [Gnat]", "names: []")

        with pytest.raises(ValueError, match="must not be empty"):
            load_generator_ranges(write_yaml(tmp_path, content))
