from __future__ import annotations

from pathlib import Path
import tempfile
import textwrap
import unittest

from core.command_runner import SubprocessCommandRunner
from core.config_loader import (
    FILE_LOADERS,
    Settings,
    load_config_file,
    load_settings,
    merge_mappings,
    normalize_string_list,
    register_loader,
    settings_from_mapping,
)
from core.environment import StaticEnvironment


class ConfigLoaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        self.env = StaticEnvironment(home=str(self.root), cwd="/work")

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_missing_file_gives_defaults(self) -> None:
        settings = load_settings(str(self.root / "missing.toml"), environment=self.env)
        self.assertEqual(settings, Settings())

    def test_default_location_under_home(self) -> None:
        config_dir = self.root / ".config" / "core"
        config_dir.mkdir(parents=True)
        (config_dir / "settings.toml").write_text('[console]\nlevel = "info"\n')
        settings = load_settings(environment=self.env)
        self.assertEqual(settings.console_level, "info")

    def test_toml_settings(self) -> None:
        path = self.root / "settings.toml"
        path.write_text(
            textwrap.dedent(
                """
                [console]
                level = "Debug"

                [exec]
                search_path = ["~/bin", "tools", "~/bin"]
                """
            ).strip()
        )
        settings = load_settings(str(path), environment=self.env)
        self.assertEqual(settings.console_level, "debug")
        self.assertEqual(settings.search_path, [f"{self.root}/bin", "/work/tools"])

        runner = settings.runner()
        self.assertIsInstance(runner, SubprocessCommandRunner)
        self.assertEqual(runner.search_path, (f"{self.root}/bin", "/work/tools"))
        self.assertEqual(settings.console().level_name, "debug")

    def test_yaml_settings_with_comma_list(self) -> None:
        path = self.root / "settings.yaml"
        path.write_text(
            textwrap.dedent(
                """
                console:
                  level: error
                exec:
                  search_path: "/opt/bin, ,/usr/local/bin,"
                """
            ).strip()
        )
        settings = load_settings(str(path), environment=self.env)
        self.assertEqual(settings.console_level, "error")
        self.assertEqual(settings.search_path, ["/opt/bin", "/usr/local/bin"])

    def test_json_settings_and_overrides(self) -> None:
        path = self.root / "settings.json"
        path.write_text('{"console": {"level": "info"}, "exec": {"search_path": ["/opt/bin"]}}')
        settings = load_settings(str(path), overrides={"console": {"level": "none"}}, environment=self.env)
        self.assertEqual(settings.console_level, "none")
        self.assertEqual(settings.search_path, ["/opt/bin"])

    def test_invalid_level(self) -> None:
        with self.assertRaises(ValueError):
            settings_from_mapping({"console": {"level": "loud"}}, environment=self.env)

    def test_invalid_sections(self) -> None:
        with self.assertRaises(TypeError):
            settings_from_mapping({"exec": ["/bin"]}, environment=self.env)
        with self.assertRaises(TypeError):
            settings_from_mapping({"exec": {"search_path": [1, 2]}}, environment=self.env)

    def test_unsupported_extension(self) -> None:
        path = self.root / "settings.ini"
        path.write_text("[console]\n")
        with self.assertRaises(ValueError):
            load_config_file(path)

    def test_root_must_be_mapping(self) -> None:
        path = self.root / "settings.json"
        path.write_text("[1, 2]")
        with self.assertRaises(TypeError):
            load_config_file(path)

    def test_empty_yaml_is_empty_mapping(self) -> None:
        path = self.root / "settings.yml"
        path.write_text("")
        self.assertEqual(load_config_file(path), {})

    def test_register_loader(self) -> None:
        register_loader(".CONF", lambda stream: {"console": {"level": stream.read().strip()}})
        try:
            path = self.root / "settings.conf"
            path.write_text("info\n")
            self.assertEqual(load_settings(str(path), environment=self.env).console_level, "info")
        finally:
            FILE_LOADERS.pop(".conf")

        with self.assertRaises(ValueError):
            register_loader("conf", lambda stream: {})


class HelperTests(unittest.TestCase):
    def test_merge_mappings(self) -> None:
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        overlay = {"b": {"c": 4, "e": 5}, "f": 6}
        self.assertEqual(merge_mappings(base, overlay), {"a": 1, "b": {"c": 4, "d": 3, "e": 5}, "f": 6})
        self.assertEqual(base, {"a": 1, "b": {"c": 2, "d": 3}})

    def test_normalize_string_list(self) -> None:
        self.assertEqual(normalize_string_list(None), [])
        self.assertEqual(normalize_string_list("a, b,,c "), ["a", "b", "c"])
        self.assertEqual(normalize_string_list([" a ", "", "b"]), ["a", "b"])
        with self.assertRaises(TypeError):
            normalize_string_list(42, field_name="paths")


if __name__ == "__main__":
    unittest.main()
