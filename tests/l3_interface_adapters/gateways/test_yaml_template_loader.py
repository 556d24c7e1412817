"""Tests for YAML template loader gateway."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import doubt_solver.l3_interface_adapters.gateways.yaml_template_loader as mod
from doubt_solver.l3_interface_adapters.gateways.yaml_template_loader import YamlTemplateLoader, builtin_names

_USER_TEMPLATE = """\
metadata:
  name: "Terse Tutor"
redirect_message: "Back to the problem, please."
system_prompt_template: "{title}|{description}|{test_cases}|{start_code}|{redirect_message}"
"""


@pytest.fixture
def user_templates_dir(tmp_path: Path, monkeypatch) -> Path:
    d = tmp_path / 'templates'
    d.mkdir()
    monkeypatch.setattr(mod, 'USER_TEMPLATES_DIR', d)
    return d


class TestYamlTemplateLoader:
    def test_builtin_names(self):
        assert 'dsa_tutor' in builtin_names()

    def test_load_builtin(self, user_templates_dir):
        tmpl = YamlTemplateLoader().load('dsa_tutor')
        assert tmpl.metadata.key == 'dsa_tutor'
        assert tmpl.metadata.name == 'DSA Tutor'
        assert '{title}' in tmpl.system_prompt_template
        assert tmpl.redirect_message.startswith('I can only help with the current DSA problem.')

    def test_load_from_path(self, tmp_path: Path):
        p = tmp_path / 'mine.yaml'
        p.write_text(_USER_TEMPLATE, encoding='utf-8')
        tmpl = YamlTemplateLoader().load(str(p))
        assert tmpl.metadata.name == 'Terse Tutor'

    def test_user_template_overrides_builtin(self, user_templates_dir):
        (user_templates_dir / 'dsa_tutor.yaml').write_text(_USER_TEMPLATE, encoding='utf-8')
        tmpl = YamlTemplateLoader().load('dsa_tutor')
        assert tmpl.metadata.name == 'Terse Tutor'
        assert tmpl.metadata.key == 'dsa_tutor'

    def test_unknown_raises(self, user_templates_dir):
        with pytest.raises(FileNotFoundError, match='dsa_tutor'):
            YamlTemplateLoader().load('nope')

    def test_list_templates(self, user_templates_dir):
        (user_templates_dir / 'terse.yaml').write_text(_USER_TEMPLATE, encoding='utf-8')
        keys = [m.key for m in YamlTemplateLoader().list_templates()]
        assert keys == sorted(keys)
        assert {'dsa_tutor', 'terse'} <= set(keys)

    def test_stray_braces_fail_at_load(self, tmp_path: Path):
        p = tmp_path / 'json_example.yaml'
        p.write_text(
            'redirect_message: "Back to the problem."\n'
            'system_prompt_template: |\n'
            '  {title}|{description}|{test_cases}|{start_code}|{redirect_message}\n'
            '  Example: d = {"a": 1}\n',
            encoding='utf-8',
        )
        with pytest.raises(ValidationError, match='unknown placeholder'):
            YamlTemplateLoader().load(str(p))
