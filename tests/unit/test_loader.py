"""Tests for build file loading and template rendering."""

from pathlib import Path

import pytest

from schematool.core.exceptions import ConfigError
from schematool.models.loader import load_build
from schematool.models.templates import render_templates


def write(path: Path, content: str) -> Path:
    path.write_text(content)
    return path


class TestRenderTemplates:
    """Tests for template rendering."""

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("PU_NAME", "shop")
        result = render_templates({"pu": "{{ env_var('PU_NAME') }}"})
        assert result == {"pu": "shop"}

    def test_cli_var(self):
        result = render_templates({"x": ["{{ var('A') }}-{{ var('B') }}"]}, {"A": "1", "B": "2"})
        assert result == {"x": ["1-2"]}

    def test_project_name(self):
        result = render_templates({"name": "shop", "ddl": "{{ project.name }}.ddl"})
        assert result["ddl"] == "shop.ddl"

    def test_non_strings_untouched(self):
        data = {"verbose": True, "n": 3, "none": None}
        assert render_templates(data) == data

    def test_missing_env_var(self, monkeypatch):
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        with pytest.raises(ConfigError):
            render_templates({"x": "{{ env_var('NOT_SET_ANYWHERE') }}"})

    def test_missing_cli_var(self):
        with pytest.raises(ConfigError) as exc_info:
            render_templates({"x": "{{ var('A') }}"}, {"B": "2"})
        assert exc_info.value.context["key"] == "A"

    def test_unknown_function(self):
        with pytest.raises(ConfigError):
            render_templates({"x": "{{ secret('A') }}"})

    def test_unknown_attribute(self):
        with pytest.raises(ConfigError):
            render_templates({"x": "{{ project.version }}"})


class TestLoadBuild:
    """Tests for load_build."""

    def test_minimal_build(self, build_dir):
        path = write(build_dir / "build.yaml", "name: shop\n")
        config = load_build(path)

        assert config.name == "shop"
        assert config.project_dir == build_dir.resolve()
        assert config.compiled_output.classes_dirs == [Path("build/classes")]
        assert config.datanucleus.skip is None
        assert config.datanucleus.schema_tool == {}

    def test_full_build(self, build_dir):
        path = write(
            build_dir / "build.yaml",
            """
name: shop
project_dir: /srv/shop
compiled_output:
  classes_dirs: [out/classes]
  resources_dir: out/resources
runner:
  java_executable: /usr/bin/java
  classpath: [lib/dn.jar]
datanucleus:
  skip: true
  schema_tool:
    dialect: JPA
    persistence_unit_name: "{{ var('PU') }}"
""",
        )
        config = load_build(path, {"PU": "shop-pu"})

        assert config.project_dir == Path("/srv/shop")
        assert config.compiled_output.resources_dir == Path("out/resources")
        assert config.runner.java_executable == "/usr/bin/java"
        assert config.datanucleus.skip is True
        assert config.datanucleus.schema_tool == {
            "dialect": "JPA",
            "persistence_unit_name": "shop-pu",
        }

    def test_file_not_found(self, build_dir):
        with pytest.raises(ConfigError) as exc_info:
            load_build(build_dir / "missing.yaml")
        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, build_dir):
        path = write(build_dir / "bad.yaml", "name: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_build(path)
        assert "Invalid YAML" in str(exc_info.value)

    def test_not_a_mapping(self, build_dir):
        path = write(build_dir / "list.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError):
            load_build(path)

    def test_missing_name(self, build_dir):
        path = write(build_dir / "noname.yaml", "datanucleus: {}\n")
        with pytest.raises(ConfigError) as exc_info:
            load_build(path)
        assert exc_info.value.context["path"] == str(path)

    def test_unknown_top_level_key(self, build_dir):
        path = write(build_dir / "extra.yaml", "name: shop\nschema_tool: {}\n")
        with pytest.raises(ConfigError):
            load_build(path)
