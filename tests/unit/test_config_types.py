"""Tests for the compiled runtime configuration types."""

import dataclasses
import re
from pathlib import Path

import pytest

from nukeconfig.config.types import Configuration, FilterRule, ResourceType
from tests.utils import compile_all


class TestFilterRule:
    def test_default_is_empty(self):
        rule = FilterRule()

        assert rule.is_empty
        assert rule.patterns == []

    def test_patterns_in_declaration_order(self):
        rule = FilterRule(names_regex=tuple(compile_all("^b", "^a", "^c")))

        assert rule.patterns == ["^b", "^a", "^c"]
        assert not rule.is_empty

    def test_frozen(self):
        rule = FilterRule()

        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.names_regex = (re.compile("x"),)


class TestResourceType:
    def setup_method(self):
        self.resource_type = ResourceType(
            include=FilterRule(names_regex=tuple(compile_all("^prod-"))),
            exclude=FilterRule(names_regex=tuple(compile_all("-tmp$"))),
        )

    def test_should_include(self):
        assert self.resource_type.should_include("prod-db")
        assert not self.resource_type.should_include("prod-db-tmp")
        assert not self.resource_type.should_include("dev-db")

    def test_filter_names_keeps_order(self):
        names = ["prod-b", "dev-a", "prod-a", "prod-a-tmp"]

        assert self.resource_type.filter_names(names) == ["prod-b", "prod-a"]

    def test_empty_resource_type_includes_everything(self):
        assert ResourceType().filter_names(["x", "y"]) == ["x", "y"]


class TestConfiguration:
    def test_defaults(self):
        config = Configuration()

        assert config.path is None
        assert config.total_patterns == 0
        assert config.s3.include.is_empty
        assert config.iam_users.exclude.is_empty

    def test_resource_types_keyed_by_yaml_key(self):
        s3 = ResourceType(include=FilterRule(names_regex=tuple(compile_all("a"))))
        config = Configuration(s3=s3, path=Path("/tmp/config.yml"))

        assert list(config.resource_types) == ["s3", "IAMUsers"]
        assert config.resource_types["s3"] is s3
        assert config.total_patterns == 1

    @pytest.mark.parametrize("key", ["IAMUsers", "iam_users"])
    def test_get_resource_type_by_either_name(self, key):
        iam_users = ResourceType(exclude=FilterRule(names_regex=tuple(compile_all("^test-"))))
        config = Configuration(iam_users=iam_users)

        assert config.get_resource_type(key) is iam_users

    def test_get_unknown_resource_type(self):
        with pytest.raises(KeyError, match="Unknown resource type: ec2"):
            Configuration().get_resource_type("ec2")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Configuration().s3 = ResourceType()
