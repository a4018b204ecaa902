import pytest

from gqlcore.social import USERS, AdminResolver, Page, Resolver, SearchResult


@pytest.fixture
def resolver():
    return Resolver()


def _names(users):
    return [u.name for u in users]


def test_admin_inline_fragments(resolver):
    admin = resolver.admin("0x01")
    user = admin.to_user()
    assert user.email == "[email]"
    assert admin.name == "Albus Dumbledore"
    assert admin.role == "ADMIN"


def test_admin_with_wrong_role_raises(resolver):
    with pytest.raises(LookupError) as info:
        resolver.admin("0x02")
    assert str(info.value) == "user with id=0x02 and role=ADMIN does not exist"


def test_admin_with_explicit_user_role(resolver):
    admin = resolver.admin("0x02", role="USER")
    assert admin.to_user().name == "Harry Potter"


def test_admin_resolver_non_user_has_no_user():
    class Other:
        id = "x"
        name = "n"
        role = "ADMIN"

    assert AdminResolver(Other()).to_user() is None


def test_user_lookup(resolver):
    user = resolver.user("0x03")
    assert user.name == "Hermione Granger"
    assert user.phone == "[phone]"
    assert user.address == ["233 dorm room @ Hogwarts", "786 @ random place"]


def test_unknown_user_raises(resolver):
    with pytest.raises(LookupError) as info:
        resolver.user("0x09")
    assert str(info.value) == "user with id=0x09 does not exist"


def test_search_matches_names(resolver):
    results = resolver.search("Potter")
    assert [r.to_user().name for r in results] == ["Harry Potter"]


def test_search_empty_text_matches_everyone(resolver):
    results = resolver.search("")
    assert [r.to_user() for r in results] == list(USERS)


def test_search_no_match(resolver):
    assert resolver.search("Voldemort") == []


def test_search_result_non_user():
    assert SearchResult("nothing").to_user() is None


def test_friends_without_page(resolver):
    harry = resolver.user("0x02")
    assert _names(harry.friends_resolver()) == [
        "Albus Dumbledore", "Hermione Granger", "Ronald Weasley",
    ]


def test_friends_with_first(resolver):
    harry = resolver.user("0x02")
    assert _names(harry.friends_resolver(Page(first=1))) == [
        "Hermione Granger", "Ronald Weasley",
    ]


def test_friends_with_last(resolver):
    harry = resolver.user("0x02")
    assert _names(harry.friends_resolver(Page(last=2))) == [
        "Albus Dumbledore", "Hermione Granger",
    ]


@pytest.mark.parametrize("last", [0, 10])
def test_friends_last_zero_or_too_large_means_all(resolver, last):
    harry = resolver.user("0x02")
    assert harry.friends_resolver(Page(last=last)) == harry.friends


def test_friends_first_at_end_is_empty(resolver):
    harry = resolver.user("0x02")
    assert harry.friends_resolver(Page(first=3)) == []


def test_friends_first_beyond_end_raises(resolver):
    harry = resolver.user("0x02")
    with pytest.raises(ValueError, match="not enough users"):
        harry.friends_resolver(Page(first=4))


def test_friends_first_after_last_raises(resolver):
    harry = resolver.user("0x02")
    with pytest.raises(ValueError):
        harry.friends_resolver(Page(first=2, last=1))


@pytest.mark.parametrize("user_id", ["0x01", "0x02", "0x03", "0x04"])
def test_friendships_are_between_known_users(resolver, user_id):
    user = resolver.user(user_id)
    for friend in user.friends_resolver():
        looked_up = resolver.user(friend.id)
        assert looked_up.name == friend.name
        assert user.name in _names(looked_up.friends_resolver())