from urllib.parse import quote

import pytest

from jaclient import ConfigurationError, JsonApiClient, NotFoundError, has_many, has_one


@pytest.fixture
def client() -> JsonApiClient:
    client = JsonApiClient(api_url="http://api/", transport=lambda request: None)
    client.define("post", {"title": "", "author": has_one("user"), "comments": has_many("comment")})
    client.define("comment", {"body": ""})
    client.define("user", {"name": ""})
    return client


def test_collection_and_resource_paths(client: JsonApiClient) -> None:
    assert client.collection_path_for("post") == "posts"
    assert client.resource_path_for("post", 1) == "posts/1"


@pytest.mark.parametrize("id_", ["1", 42, "a b", "x/y", "ü?&="])
def test_resource_path_encodes_id(client: JsonApiClient, id_) -> None:
    assert client.resource_path_for("comment", id_) == client.collection_path_for("comment") + "/" + quote(str(id_), safe="!*'()")


def test_custom_collection_path(client: JsonApiClient) -> None:
    client.define("post", {"title": ""}, {"collection_path": "blog-posts"})

    assert client.collection_path_for("post") == "blog-posts"
    assert client.one("post", 3).build_path() == "blog-posts/3"


def test_undefined_model_path_is_pluralized(client: JsonApiClient) -> None:
    assert client.collection_path_for("category") == "categories"


def test_no_pluralization() -> None:
    client = JsonApiClient(api_url="http://api", pluralize=False, transport=lambda request: None)

    assert client.all("post").build_url() == "http://api/post"


def test_chained_path(client: JsonApiClient) -> None:
    builder = client.one("post", 1).relationships("comments")

    assert builder.build_path() == "posts/1/relationships/comments"
    assert builder.build_url() == "http://api/posts/1/relationships/comments"
    assert builder.model == "comment"


def test_relationships_without_name(client: JsonApiClient) -> None:
    assert client.one("post", 1).relationships().build_path() == "posts/1/relationships"


def test_nested_resources(client: JsonApiClient) -> None:
    assert client.one("user", 1).all("post").build_path() == "users/1/posts"


def test_relationships_without_preceding_model(client: JsonApiClient) -> None:
    with pytest.raises(ConfigurationError):
        client.builder().relationships("comments")

    with pytest.raises(ConfigurationError):
        client.one("post", 1).relationships().relationships("comments")


def test_relationships_undefined(client: JsonApiClient) -> None:
    with pytest.raises(NotFoundError):
        client.one("post", 1).relationships("likes")


def test_relationships_on_plain_attribute(client: JsonApiClient) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        client.one("post", 1).relationships("title")
    assert "not a relationship" in exc_info.value.message


def test_builder_is_immutable(client: JsonApiClient) -> None:
    base = client.one("post", 1)
    comments = base.relationships("comments")
    author = base.relationships("author")

    assert base.build_path() == "posts/1"
    assert comments.build_path() == "posts/1/relationships/comments"
    assert author.build_path() == "posts/1/relationships/author"
    assert base.reset().build_path() == ""
    assert client.reset_builder().stack == ()


def test_trailing_slash_policy(client: JsonApiClient) -> None:
    client.trailing_slash = {"collection": True, "resource": False}

    assert client.all("post").build_url() == "http://api/posts/"
    assert client.one("post", 1).build_url() == "http://api/posts/1"
    assert client.builder().build_url() == "http://api/"

    client.trailing_slash = {"collection": False, "resource": True}

    assert client.all("post").build_url() == "http://api/posts"
    assert client.one("post", 1).build_url() == "http://api/posts/1/"
    assert client.one("post", 1).relationships("comments").build_url() == "http://api/posts/1/relationships/comments"


def test_trailing_slash_option() -> None:
    client = JsonApiClient(api_url="http://api", trailing_slash=True, transport=lambda request: None)

    assert client.trailing_slash == {"collection": True, "resource": True}
    assert client.collection_url_for("post") == "http://api/posts/"
    assert client.resource_url_for("post", 1) == "http://api/posts/1/"

    client = JsonApiClient(api_url="http://api", trailing_slash={"resource": True}, transport=lambda request: None)

    assert client.trailing_slash == {"collection": False, "resource": True}


def test_url_for(client: JsonApiClient) -> None:
    assert client.url_for("post", 1) == "http://api/posts/1"
    assert client.url_for("post") == "http://api/posts"
    assert client.url_for(builder=client.one("post", 1).relationships("author")) == "http://api/posts/1/relationships/author"
    assert client.path_for("post", 1) == "posts/1"
    assert client.path_for("post") == "posts"
    assert client.path_for() == ""


def test_resource_path_escapes_reserved_characters(client: JsonApiClient) -> None:
    assert client.resource_path_for("post", "a b") == "posts/a%20b"
    assert client.resource_path_for("post", "x/y") == "posts/x%2Fy"
    assert client.resource_path_for("post", "it's(1)") == "posts/it's(1)"


def test_builders_are_hashable(client: JsonApiClient) -> None:
    first = client.one("post", 1).relationships("comments")
    second = client.one("post", 1).relationships("comments")

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, client.all("post")}) == 2
    assert {first: "comments"}[second] == "comments"
