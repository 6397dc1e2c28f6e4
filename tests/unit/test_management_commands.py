"""
Unit tests for the dump_list_meta management command.
"""

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

pytestmark = pytest.mark.unit


def _dump(**options):
    out = StringIO()
    call_command("dump_list_meta", stdout=out, **options)
    return json.loads(out.getvalue())


def test_dump_all_lists():
    payload = _dump()

    assert [entry["name"] for entry in payload] == ["User", "Company", "Post"]
    assert payload[2]["schema"] == {
        "type": "Post",
        "queries": ["Post", "allPosts", "_allPostsMeta"],
        "fields": [
            {"name": "content", "type": "Text"},
            {"name": "author", "type": "Relationship"},
        ],
        "relatedFields": [],
    }


def test_dump_one_list_with_field_type():
    payload = _dump(list_name="Company", field_type="Text")

    assert payload == [
        {
            "name": "Company",
            "schema": {
                "type": "Company",
                "queries": ["Company", "allCompanies", "_allCompaniesMeta"],
                "fields": [{"name": "name", "type": "Text"}],
                "relatedFields": [
                    {
                        "type": "User",
                        "fields": ["company", "workHistory", "_workHistoryMeta"],
                    }
                ],
            },
        }
    ]


def test_dump_unknown_list_prints_empty_listing():
    assert _dump(list_name="Comment") == []


@override_settings(LIST_META={})
def test_dump_without_configuration_fails():
    with pytest.raises(CommandError):
        call_command("dump_list_meta", stdout=StringIO())
