"""
Integration tests for the list metadata GraphQL queries.
"""

import pytest

from list_meta.exceptions import ConfigurationError
from list_meta.testing import ListMetaTestClient, build_schema
from tests.lists import EXAMPLE_LISTS

pytestmark = pytest.mark.integration

SCHEMA_SELECTION = """
    name
    schema {
        type
        queries
        fields {
            name
            type
        }
        relatedFields {
            type
            fields
        }
    }
"""

USER_META = {
    "name": "User",
    "schema": {
        "type": "User",
        "queries": ["User", "allUsers", "_allUsersMeta"],
        "fields": [
            {"name": "company", "type": "Relationship"},
            {"name": "workHistory", "type": "Relationship"},
        ],
        "relatedFields": [
            {"type": "Company", "fields": ["employees", "_employeesMeta"]},
            {"type": "Post", "fields": ["author"]},
        ],
    },
}

COMPANY_META = {
    "name": "Company",
    "schema": {
        "type": "Company",
        "queries": ["Company", "allCompanies", "_allCompaniesMeta"],
        "fields": [
            {"name": "name", "type": "Text"},
            {"name": "employees", "type": "Relationship"},
        ],
        "relatedFields": [
            {"type": "User", "fields": ["company", "workHistory", "_workHistoryMeta"]},
        ],
    },
}

POST_META = {
    "name": "Post",
    "schema": {
        "type": "Post",
        "queries": ["Post", "allPosts", "_allPostsMeta"],
        "fields": [
            {"name": "content", "type": "Text"},
            {"name": "author", "type": "Relationship"},
        ],
        "relatedFields": [],
    },
}


@pytest.fixture
def client():
    harness = build_schema(EXAMPLE_LISTS)
    return ListMetaTestClient(harness.schema)


def test_single_list_meta_query(client):
    result = client.execute(
        """
        query {
            _CompaniesMeta {
                schema {
                    type
                    queries
                    relatedFields {
                        type
                        fields
                    }
                }
            }
        }
        """
    )

    assert "errors" not in result
    assert result["data"]["_CompaniesMeta"]["schema"] == {
        "type": "Company",
        "queries": ["Company", "allCompanies", "_allCompaniesMeta"],
        "relatedFields": [
            {"type": "User", "fields": ["company", "workHistory", "_workHistoryMeta"]}
        ],
    }


def test_single_list_meta_without_related_fields(client):
    result = client.execute(
        "query { _PostsMeta { schema { type queries relatedFields { type fields } } } }"
    )

    assert "errors" not in result
    assert result["data"]["_PostsMeta"]["schema"] == {
        "type": "Post",
        "queries": ["Post", "allPosts", "_allPostsMeta"],
        "relatedFields": [],
    }


def test_all_lists_meta(client):
    result = client.execute("query { _ksListsMeta { %s } }" % SCHEMA_SELECTION)

    assert "errors" not in result
    assert result["data"]["_ksListsMeta"] == [USER_META, COMPANY_META, POST_META]


def test_all_lists_meta_for_one_list(client):
    result = client.execute(
        'query { _ksListsMeta(where: { key: "User" }) { %s } }' % SCHEMA_SELECTION
    )

    assert "errors" not in result
    assert result["data"]["_ksListsMeta"] == [USER_META]


def test_all_lists_meta_for_one_list_and_field_type(client):
    result = client.execute(
        """
        query {
            _ksListsMeta(where: { key: "Company" }) {
                name
                schema {
                    type
                    queries
                    fields(where: { type: "Text" }) {
                        name
                        type
                    }
                    relatedFields {
                        type
                        fields
                    }
                }
            }
        }
        """
    )

    assert "errors" not in result
    assert result["data"]["_ksListsMeta"] == [
        {
            "name": "Company",
            "schema": {
                "type": "Company",
                "queries": ["Company", "allCompanies", "_allCompaniesMeta"],
                "fields": [{"name": "name", "type": "Text"}],
                "relatedFields": COMPANY_META["schema"]["relatedFields"],
            },
        }
    ]


def test_all_lists_meta_with_unknown_key(client):
    result = client.execute('query { _ksListsMeta(where: { key: "Comment" }) { name } }')

    assert "errors" not in result
    assert result["data"]["_ksListsMeta"] == []


def test_all_lists_meta_with_unknown_field_type(client):
    result = client.execute(
        """
        query {
            _ksListsMeta {
                name
                schema {
                    fields(where: { type: "Password" }) { name }
                    relatedFields { type }
                }
            }
        }
        """
    )

    assert "errors" not in result
    entries = result["data"]["_ksListsMeta"]
    assert [entry["schema"]["fields"] for entry in entries] == [[], [], []]
    assert [entry["schema"]["relatedFields"] for entry in entries] == [
        [{"type": "Company"}, {"type": "Post"}],
        [{"type": "User"}],
        [],
    ]


def test_all_lists_query_name_is_configurable():
    harness = build_schema(EXAMPLE_LISTS, all_lists_query_name="_listsMeta")
    result = ListMetaTestClient(harness.schema).execute("query { _listsMeta { name } }")

    assert "errors" not in result
    assert result["data"]["_listsMeta"] == [
        {"name": "User"},
        {"name": "Company"},
        {"name": "Post"},
    ]


def test_self_referencing_list_query():
    harness = build_schema(
        [
            {
                "name": "Category",
                "fields": {
                    "title": "Text",
                    "parent": {"type": "Relationship", "ref": "Category"},
                },
            }
        ]
    )
    result = ListMetaTestClient(harness.schema).execute(
        "query { _CategoriesMeta { name schema { relatedFields { type fields } } } }"
    )

    assert "errors" not in result
    assert result["data"]["_CategoriesMeta"] == {
        "name": "Category",
        "schema": {"relatedFields": [{"type": "Category", "fields": ["parent"]}]},
    }


def test_colliding_meta_query_names_are_rejected():
    with pytest.raises(ConfigurationError):
        build_schema([{"name": "ksList"}])
