"""
Unit tests for list query naming conventions.
"""

import pytest
from django.test import override_settings

from list_meta.core.naming import (
    get_list_meta_query_name,
    get_query_names,
    get_related_meta_name,
    pluralize,
)

pytestmark = pytest.mark.unit


def irregular_pluralizer(name):
    return {"Person": "People"}.get(name, f"{name}s")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Post", "Posts"),
        ("User", "Users"),
        ("Company", "Companies"),
        ("Day", "Days"),
        ("Address", "Addresses"),
        ("Box", "Boxes"),
        ("Branch", "Branches"),
        ("Y", "Ys"),
        ("", ""),
    ],
)
def test_pluralize_suffix_rules(name, expected):
    assert pluralize(name) == expected


def test_query_names_are_fetch_one_fetch_many_and_meta():
    assert get_query_names("Post") == ["Post", "allPosts", "_allPostsMeta"]
    assert get_query_names("Company") == [
        "Company",
        "allCompanies",
        "_allCompaniesMeta",
    ]


def test_query_names_use_explicit_pluralizer():
    assert get_query_names("Person", irregular_pluralizer) == [
        "Person",
        "allPeople",
        "_allPeopleMeta",
    ]


@override_settings(LIST_META={"pluralizer": "tests.unit.test_naming.irregular_pluralizer"})
def test_query_names_use_configured_pluralizer():
    assert get_query_names("Person") == ["Person", "allPeople", "_allPeopleMeta"]
    assert get_list_meta_query_name("Person") == "_PeopleMeta"


def test_list_meta_query_name():
    assert get_list_meta_query_name("Company") == "_CompaniesMeta"
    assert get_list_meta_query_name("Post") == "_PostsMeta"


def test_related_meta_name():
    assert get_related_meta_name("workHistory") == "_workHistoryMeta"
