"""Tests for wren.resolvers: per-category candidate ladders."""

from wren import resolvers
from wren.context import Attachment, Post, PostType, RequestContext, Term, User
from wren.resolvers import Override


class TestSimpleCategories:
    def test_index(self) -> None:
        assert resolvers.index(RequestContext()) == ["index"]

    def test_not_found(self) -> None:
        assert resolvers.not_found(RequestContext()) == ["404"]

    def test_date(self) -> None:
        assert resolvers.date(RequestContext()) == ["date"]

    def test_home_includes_index(self) -> None:
        assert resolvers.home(RequestContext()) == ["home", "index"]

    def test_front_page(self) -> None:
        assert resolvers.front_page(RequestContext()) == ["front-page"]

    def test_search(self) -> None:
        assert resolvers.search(RequestContext()) == ["search"]

    def test_singular(self) -> None:
        assert resolvers.singular(RequestContext()) == ["singular"]


class TestArchive:
    def test_single_post_type(self) -> None:
        ctx = RequestContext(query_post_types=("product",))
        assert resolvers.archive(ctx) == ["archive-product", "archive"]

    def test_multiple_post_types(self) -> None:
        ctx = RequestContext(query_post_types=("product", "post"))
        assert resolvers.archive(ctx) == ["archive"]

    def test_empty_entries_ignored(self) -> None:
        ctx = RequestContext(query_post_types=("", "product"))
        assert resolvers.archive(ctx) == ["archive-product", "archive"]

    def test_no_post_type(self) -> None:
        assert resolvers.archive(RequestContext()) == ["archive"]


class TestPostTypeArchive:
    def test_with_archive(self) -> None:
        ctx = RequestContext(
            query_post_types=("product",),
            post_type_object=PostType("product", has_archive=True),
        )
        assert resolvers.post_type_archive(ctx) == ["archive-product", "archive"]

    def test_without_archive_is_empty(self) -> None:
        ctx = RequestContext(
            query_post_types=("product",),
            post_type_object=PostType("product", has_archive=False),
        )
        assert resolvers.post_type_archive(ctx) == []

    def test_without_archive_ignores_query_state(self) -> None:
        ctx = RequestContext(
            is_archive=True,
            query_post_types=("a", "b"),
            post_type_object=PostType("a"),
        )
        assert resolvers.post_type_archive(ctx) == []

    def test_unknown_post_type_is_empty(self) -> None:
        ctx = RequestContext(query_post_types=("ghost",))
        assert resolvers.post_type_archive(ctx) == []


class TestAuthor:
    def test_user(self) -> None:
        ctx = RequestContext(queried_object=User(7, "jane"))
        assert resolvers.author(ctx) == ["author-jane", "author-7", "author"]

    def test_not_a_user(self) -> None:
        ctx = RequestContext(queried_object=Post(7, "post", "jane"))
        assert resolvers.author(ctx) == ["author"]

    def test_no_object(self) -> None:
        assert resolvers.author(RequestContext()) == ["author"]


class TestTermCategories:
    def test_category(self) -> None:
        ctx = RequestContext(queried_object=Term(5, "news", "category"))
        assert resolvers.category(ctx) == ["category-news", "category-5", "category"]

    def test_category_decoded_slug_first(self) -> None:
        ctx = RequestContext(queried_object=Term(3, "caf%C3%A9", "category"))
        assert resolvers.category(ctx) == [
            "category-café",
            "category-caf%C3%A9",
            "category-3",
            "category",
        ]

    def test_category_empty_slug(self) -> None:
        ctx = RequestContext(queried_object=Term(5, "", "category"))
        assert resolvers.category(ctx) == ["category"]

    def test_tag(self) -> None:
        ctx = RequestContext(queried_object=Term(9, "python", "post_tag"))
        assert resolvers.tag(ctx) == ["tag-python", "tag-9", "tag"]

    def test_tag_on_user_contributes_base_only(self) -> None:
        ctx = RequestContext(queried_object=User(1, "admin"))
        assert resolvers.tag(ctx) == ["tag"]

    def test_taxonomy(self) -> None:
        ctx = RequestContext(queried_object=Term(4, "red", "color"))
        assert resolvers.taxonomy(ctx) == [
            "taxonomy-color-red",
            "taxonomy-color",
            "taxonomy",
        ]

    def test_taxonomy_decoded_slug(self) -> None:
        ctx = RequestContext(queried_object=Term(4, "dark%20red", "color"))
        assert resolvers.taxonomy(ctx) == [
            "taxonomy-color-dark red",
            "taxonomy-color-dark%20red",
            "taxonomy-color",
            "taxonomy",
        ]

    def test_taxonomy_no_term(self) -> None:
        assert resolvers.taxonomy(RequestContext()) == ["taxonomy"]


class TestPage:
    def test_pagename_and_id(self) -> None:
        ctx = RequestContext(pagename="about", queried_object=Post(7, "page", "about"))
        assert resolvers.page(ctx) == ["page-about", "page-7", "page"]

    def test_pagename_falls_back_to_post_name(self) -> None:
        ctx = RequestContext(queried_object=Post(7, "page", "contact"))
        assert resolvers.page(ctx) == ["page-contact", "page-7", "page"]

    def test_template_override_first(self) -> None:
        ctx = RequestContext(
            page_template="templates/wide.php",
            queried_object=Post(7, "page", "about"),
        )
        names = resolvers.page(ctx)
        assert names == ["templates/wide.php", "page-about", "page-7", "page"]
        assert isinstance(names[0], Override)

    def test_decoded_pagename(self) -> None:
        ctx = RequestContext(pagename="%C3%BCber", queried_object=Post(2, "page"))
        assert resolvers.page(ctx) == ["page-über", "page-%C3%BCber", "page-2", "page"]

    def test_nothing_known(self) -> None:
        assert resolvers.page(RequestContext()) == ["page"]


class TestSingle:
    def test_post(self) -> None:
        ctx = RequestContext(queried_object=Post(42, "post", "hello-world"))
        assert resolvers.single(ctx) == ["single-post-hello-world", "single-post", "single"]

    def test_decoded_name(self) -> None:
        ctx = RequestContext(queried_object=Post(42, "post", "caf%C3%A9"))
        assert resolvers.single(ctx) == [
            "single-post-café",
            "single-post-caf%C3%A9",
            "single-post",
            "single",
        ]

    def test_override_marked(self) -> None:
        ctx = RequestContext(
            page_template="templates/feature.php",
            queried_object=Post(42, "post", "hello-world"),
        )
        names = resolvers.single(ctx)
        assert names[0] == "templates/feature.php"
        assert isinstance(names[0], Override)

    def test_attachment_is_single(self) -> None:
        ctx = RequestContext(queried_object=Attachment(3, "photo", "image/png"))
        assert resolvers.single(ctx) == [
            "single-attachment-photo",
            "single-attachment",
            "single",
        ]

    def test_term_mismatch(self) -> None:
        ctx = RequestContext(queried_object=Term(1, "news"))
        assert resolvers.single(ctx) == ["single"]


class TestEmbed:
    def test_with_format(self) -> None:
        ctx = RequestContext(post_format="video", queried_object=Post(1, "post", "clip"))
        assert resolvers.embed(ctx) == ["embed-post-video", "embed-post", "embed"]

    def test_without_format(self) -> None:
        ctx = RequestContext(queried_object=Post(1, "post", "clip"))
        assert resolvers.embed(ctx) == ["embed-post", "embed"]

    def test_no_object(self) -> None:
        assert resolvers.embed(RequestContext(post_format="video")) == ["embed"]


class TestAttachment:
    def test_type_and_subtype(self) -> None:
        ctx = RequestContext(queried_object=Attachment(3, "photo", "image/jpeg"))
        assert resolvers.attachment(ctx) == ["image-jpeg", "jpeg", "image", "attachment"]

    def test_type_only(self) -> None:
        ctx = RequestContext(queried_object=Attachment(3, "doc", "application"))
        assert resolvers.attachment(ctx) == ["application", "attachment"]

    def test_empty_mime_type(self) -> None:
        ctx = RequestContext(queried_object=Attachment(3, "doc"))
        assert resolvers.attachment(ctx) == ["attachment"]

    def test_plain_post_is_not_an_attachment(self) -> None:
        ctx = RequestContext(queried_object=Post(3, "post", "doc"))
        assert resolvers.attachment(ctx) == ["attachment"]
