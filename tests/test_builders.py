"""
Tests for the fragment, union, partial, query and mutation builders.
"""

import pytest

from graphql_helper import (
    DuplicateRegistrationError,
    FragmentUnion,
    Mutation,
    OperationType,
    Partial,
    Query,
    TemplateError,
)
from graphql_helper.core import capitalize, render_variables_def


class TestFragmentBuilder:
    """Test fragment construction."""

    def test_fragment_without_interpolations(self, engine):
        """Zero interpolations: defs hold only the fragment itself."""
        site = engine.fragment("Site")("{ id name }")

        assert str(site) == "...Site"
        assert site.definition == "fragment Site on Site { id name }"
        assert dict(site.fragment_defs) == {"Site": site.definition}

    def test_on_type_defaults_to_name(self, engine):
        assert engine.fragment("Site")("{ id }").on_type == "Site"
        assert engine.fragment("PathOfSite", "Path")("{ id }").on_type == "Path"

    def test_nested_fragment_is_spread_and_merged(self, engine):
        site_path = engine.fragment("PathOfSite", "Path")("{ id name slug }")
        site = engine.fragment("Site")("{ id paths { ", site_path, " } }")

        assert site.definition == "fragment Site on Site { id paths { ...PathOfSite } }"
        assert dict(site.fragment_defs) == {
            "PathOfSite": "fragment PathOfSite on Path { id name slug }",
            "Site": site.definition,
        }

    def test_two_nested_fragments_give_three_keys(self, engine):
        a = engine.fragment("A")("{ a }")
        b = engine.fragment("B")("{ b }")

        ab = engine.fragment("AB", "T")("{ ", a, " ", b, " }")
        ba = engine.fragment("BA", "T")("{ ", b, " ", a, " }")

        assert set(ab.fragment_defs) == {"AB", "A", "B"}
        assert set(ba.fragment_defs) - {"BA"} == set(ab.fragment_defs) - {"AB"}

    def test_transitive_dependencies_are_flattened(self, engine):
        leaf = engine.fragment("Leaf")("{ id }")
        middle = engine.fragment("Middle")("{ leaf { ", leaf, " } }")
        top = engine.fragment("Top")("{ middle { ", middle, " } }")

        assert list(top.fragment_defs) == ["Leaf", "Middle", "Top"]

    def test_opaque_values_are_inlined(self, engine):
        clip = engine.fragment("Clip")("{ items(first: ", 10, ", draft: ", False, ") { id } }")

        assert clip.definition == "fragment Clip on Clip { items(first: 10, draft: false) { id } }"
        assert dict(clip.fragment_defs) == {"Clip": clip.definition}

    def test_own_definition_overrides_merged_entry(self, engine):
        """A dependency carrying the fragment's own name never replaces it."""
        engine.ignore_invariants()
        old = engine.fragment("Node")("{ id }")
        new = engine.fragment("Node")("{ id ", engine.partial("", old, ""), " }")

        assert new.fragment_defs["Node"] == "fragment Node on Node { id ...Node }"

    def test_duplicate_name_rejected(self, engine):
        first = engine.fragment("Site")("{ id }")

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            engine.fragment("Site")("{ id name }")

        assert exc_info.value.kind == "fragment"
        assert exc_info.value.name == "Site"
        assert engine.registry.get_fragment("Site") is first

    def test_duplicate_checked_at_build_time(self, engine):
        engine.fragment("Site")("{ id }")

        builder = engine.fragment("Site")
        with pytest.raises(DuplicateRegistrationError):
            builder("{ id }")

    def test_ignore_invariants_overwrites(self, engine):
        engine.ignore_invariants()
        engine.fragment("Site")("{ id }")
        second = engine.fragment("Site")("{ id name }")

        assert engine.registry.get_fragment("Site") is second

    def test_redefinition_does_not_touch_earlier_values(self, engine):
        """Values built before a redefinition keep the text they merged."""
        engine.ignore_invariants()
        leaf = engine.fragment("Leaf")("{ id }")
        top = engine.fragment("Top")("{ leaf { ", leaf, " } }")

        engine.fragment("Leaf")("{ id name }")

        assert top.fragment_defs["Leaf"] == "fragment Leaf on Leaf { id }"
        assert leaf.definition == "fragment Leaf on Leaf { id }"
        assert engine.registry.get_fragment("Leaf") is not leaf

    def test_empty_name_rejected(self, engine):
        with pytest.raises(TemplateError):
            engine.fragment("")

    def test_t_string_style_template(self, engine):
        class Template:
            def __init__(self, strings, values):
                self.strings = strings
                self.values = values

        leaf = engine.fragment("Leaf")("{ id }")
        site = engine.fragment("Site")(Template(("{ ", " }"), (leaf,)))

        assert site.definition == "fragment Site on Site { ...Leaf }"
        assert "Leaf" in site.fragment_defs


class TestUnionBuilder:
    """Test union construction."""

    def test_union_spread_and_defs(self, engine):
        a = engine.fragment("ClipArticle")("{ id article { title } }")
        b = engine.fragment("ClipPost")("{ id post { title } }")

        clip = engine.union(a, b)

        assert isinstance(clip, FragmentUnion)
        assert str(clip) == "__typename ...ClipArticle ...ClipPost"
        assert dict(clip.fragment_defs) == {**a.fragment_defs, **b.fragment_defs}

    def test_union_is_not_registered(self, engine):
        a = engine.fragment("A")("{ a }")
        engine.union(a)

        assert list(engine.registry.fragments) == ["A"]

    def test_empty_union(self, engine):
        clip = engine.union()

        assert str(clip) == "__typename "
        assert dict(clip.fragment_defs) == {}


class TestPartialBuilder:
    """Test partial construction."""

    def test_partial_inlines_text_and_carries_fragments(self, engine):
        site = engine.fragment("Site")("{ id }")

        part = engine.partial("site(key: $key) { ", site, " }")

        assert isinstance(part, Partial)
        assert str(part) == "site(key: $key) { ...Site }"
        assert dict(part.fragment_defs) == dict(site.fragment_defs)

    def test_partial_in_query(self, engine):
        site = engine.fragment("Site")("{ id }")
        part = engine.partial("site(key: $key) { ", site, " }")

        query = engine.query("MyOtherQuery", {"key": "String!"})("{ env ", part, " }")

        assert query.operation_text == "query MyOtherQuery ($key: String!)  { env site(key: $key) { ...Site } }"
        assert list(query.fragment_defs) == ["Site"]


class TestQueryBuilder:
    """Test query construction."""

    def test_variable_clause_rendering(self, engine):
        query = engine.query("GetPost", {"id": "ID!"})("{ post(id: $id) { title } }")

        assert isinstance(query, Query)
        assert query.operation_type is OperationType.QUERY
        assert query.operation_text == "query GetPost ($id: ID!)  { post(id: $id) { title } }"
        assert query.document_text == query.operation_text + "\n\n"
        assert dict(query.fragment_defs) == {}

    def test_multiple_variables_keep_order(self):
        clause = render_variables_def({"b": "Int", "a": "String!"})

        assert clause == "($b: Int, $a: String!) "

    def test_no_variables(self, engine):
        query = engine.query("Env")("{ env }")

        assert query.operation_text == "query Env  { env }"
        assert dict(query.variables_def) == {}

    def test_document_contains_every_fragment_once(self, engine):
        """Diamond: a shared dependency is emitted once."""
        common = engine.fragment("Common")("{ id }")
        left = engine.fragment("Left")("{ ", common, " left }")
        right = engine.fragment("Right")("{ ", common, " right }")

        query = engine.query("Diamond")("{ a { ", left, " } b { ", right, " } }")
        document = str(query)

        assert document.count("fragment Common on Common { id }") == 1
        assert document == (
            query.operation_text
            + "\n\n"
            + "\n\n".join(
                [
                    "fragment Common on Common { id }",
                    "fragment Left on Left { ...Common left }",
                    "fragment Right on Right { ...Common right }",
                ]
            )
        )

    def test_query_with_union(self, engine):
        a = engine.fragment("ClipArticle")("{ id }")
        b = engine.fragment("ClipPost")("{ id }")

        query = engine.query("MyUnionQuery")(
            "{ clips(ids: [ 630, 656 ]) { ", engine.union(a, b), " } }"
        )

        assert "{ __typename ...ClipArticle ...ClipPost }" in query.operation_text
        assert list(query.fragment_defs) == ["ClipArticle", "ClipPost"]

    def test_duplicate_operation_rejected(self, engine):
        first = engine.query("Env")("{ env }")

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            engine.query("Env")("{ env site { id } }")

        assert exc_info.value.kind == "operation"
        assert engine.registry.get_operation("Env") is first

    def test_fragment_and_operation_names_are_separate(self, engine):
        engine.fragment("Site")("{ id }")

        assert engine.query("Site")("{ site { id } }").name == "Site"

    def test_operation_is_immutable(self, engine):
        query = engine.query("Env")("{ env }")

        with pytest.raises(AttributeError):
            query.operation_text = "changed"


class TestMutationBuilder:
    """Test mutation construction."""

    def test_capitalize(self):
        assert capitalize("createPost") == "CreatePost"
        assert capitalize("x") == "X"

    def test_mutation_text(self, engine):
        post = engine.fragment("Post")("{ id title }")

        mutation = engine.mutation("createPost", {"title": "String!"})("{ post { ", post, " } }")

        assert isinstance(mutation, Mutation)
        assert mutation.name == "CreatePost"
        assert "mutation CreatePost($input: CreatePostInput!)" in mutation.operation_text
        assert mutation.operation_text == (
            "mutation CreatePost($input: CreatePostInput!) "
            "{ payload: createPost(input: $input) "
            "{ clientMutationId ... on CreatePostPayload { post { ...Post } } } }"
        )
        assert "$title" not in mutation.operation_text
        assert list(mutation.fragment_defs) == ["Post"]

    def test_registered_under_capitalized_name(self, engine):
        engine.mutation("createPost")("{ post { id } }")

        assert engine.registry.get_operation("CreatePost") is not None
        with pytest.raises(DuplicateRegistrationError):
            engine.mutation("CreatePost")("{ post { id } }")
