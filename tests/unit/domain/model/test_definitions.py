"""Tests for domain/model/definitions.py and domain/model/prepared.py."""

import pytest

from packagelint.domain.model.definitions import (
    RuleDefinition,
    RulesetDefinition,
    is_rule_definition,
    is_ruleset_definition,
)
from packagelint.domain.model.error_levels import ErrorLevel
from tests.factories import (
    make_prepared_config,
    make_prepared_rule,
    make_rule_definition,
    passing_validation,
)


class TestRuleDefinition:
    """Tests for RuleDefinition."""

    def test_defaults_always_present(self) -> None:
        definition = RuleDefinition(name="rule", do_validation=passing_validation)
        assert dict(definition.default_options) == {}
        assert dict(definition.messages) == {}
        assert definition.default_error_level is None
        assert definition.is_abstract is False
        assert definition.description == ""

    def test_copies_are_read_only(self) -> None:
        options = {"x": 1}
        definition = make_rule_definition(default_options=options)
        options["x"] = 2
        assert definition.default_options["x"] == 1
        with pytest.raises(TypeError):
            definition.default_options["x"] = 3  # type: ignore[index]

    def test_description(self) -> None:
        definition = RuleDefinition(
            name="rule",
            do_validation=passing_validation,
            docs={"description": "Checks things"},
        )
        assert definition.description == "Checks things"

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            RuleDefinition(name="", do_validation=passing_validation)

    def test_not_callable_raises(self) -> None:
        with pytest.raises(TypeError, match="do_validation must be callable"):
            RuleDefinition(name="rule", do_validation="nope")  # type: ignore[arg-type]

    def test_none_options_raises(self) -> None:
        with pytest.raises(TypeError, match="default_options must not be None"):
            RuleDefinition(
                name="rule",
                do_validation=passing_validation,
                default_options=None,  # type: ignore[arg-type]
            )


class TestRulesetDefinition:
    """Tests for RulesetDefinition."""

    def test_rules_become_tuple(self) -> None:
        ruleset = RulesetDefinition(name="set", rules=["pkg:a", "pkg:b"])  # type: ignore[arg-type]
        assert ruleset.rules == ("pkg:a", "pkg:b")

    def test_string_rules_raise(self) -> None:
        with pytest.raises(TypeError, match="not a string"):
            RulesetDefinition(name="set", rules="pkg:a")  # type: ignore[arg-type]

    def test_type_guards(self) -> None:
        ruleset = RulesetDefinition(name="set", rules=())
        rule = make_rule_definition()
        assert is_ruleset_definition(ruleset)
        assert not is_rule_definition(ruleset)
        assert is_rule_definition(rule)
        assert not is_ruleset_definition(rule)


class TestPreparedRule:
    """Tests for PreparedRule."""

    def test_message_for_known(self) -> None:
        rule = make_prepared_rule(messages={"failed": "It failed"})
        assert rule.message_for("failed") == "It failed"

    def test_message_for_falls_back_to_name(self) -> None:
        rule = make_prepared_rule()
        assert rule.message_for("failed") == "failed"

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="prepared_rule_name must not be empty"):
            make_prepared_rule(name="")


class TestPreparedConfig:
    """Tests for PreparedConfig."""

    def test_get_rule(self) -> None:
        rule = make_prepared_rule("pkg:a")
        config = make_prepared_config(rule, make_prepared_rule("pkg:b"))
        assert config.get_rule("pkg:a") is rule
        assert config.get_rule("pkg:missing") is None

    def test_duplicate_names_raise(self) -> None:
        with pytest.raises(ValueError, match="duplicate prepared_rule_name 'pkg:a'"):
            make_prepared_config(make_prepared_rule("pkg:a"), make_prepared_rule("pkg:a"))

    def test_fail_on_error_level(self) -> None:
        config = make_prepared_config(fail_on_error_level=ErrorLevel.WARNING)
        assert config.fail_on_error_level is ErrorLevel.WARNING
        assert config.rules == ()
