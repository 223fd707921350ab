"""Tests for the in-memory user service."""

import threading

import pytest

from users_api.errors import BadRequestError, ErrorKind, NotFoundError
from users_api.models.user import User, UserInput
from users_api.services.user_service import InMemoryUserService, parse_user_id


@pytest.mark.unit
def test_first_user_in_empty_store_gets_id_one() -> None:
    """Creating in an empty store assigns id 1 and leaves age absent."""
    service = InMemoryUserService()

    user = service.create_user(UserInput(name="Alice", email="a@x.com"))

    assert user == User(id=1, name="Alice", email="a@x.com")
    assert user.age is None
    assert service.list_users() == [user]


@pytest.mark.unit
def test_created_id_exceeds_existing_ids() -> None:
    """New ids are one more than the highest stored id, not the count."""
    service = InMemoryUserService([User(id=7, name="A", email="a@x.com"), User(id=3, name="B", email="b@x.com")])

    user = service.create_user(UserInput(name="C", email="c@x.com"))

    assert user.id == 8


@pytest.mark.unit
def test_deleting_max_id_allows_reissue(service: InMemoryUserService) -> None:
    """The highest id is reissued after that record is deleted."""
    service.delete_user(2)

    user = service.create_user(UserInput(name="C", email="c@x.com"))

    assert user.id == 2
    assert [u.id for u in service.list_users()] == [1, 2]


@pytest.mark.unit
def test_get_returns_stored_record(service: InMemoryUserService) -> None:
    """Get returns the exact stored record."""
    user = service.get_user(1)

    assert user == User(id=1, name="Alice", email="alice@example.com", age=30)


@pytest.mark.unit
def test_get_missing_user_raises_not_found(service: InMemoryUserService) -> None:
    """Unknown ids fail with NotFound."""
    with pytest.raises(NotFoundError) as exc_info:
        service.get_user(3)

    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert exc_info.value.message == "User not found"


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        UserInput(email="c@x.com"),
        UserInput(name="C"),
        UserInput(name="", email="c@x.com", age=20),
        UserInput(name="C", email=""),
        UserInput(),
    ],
)
def test_create_requires_name_and_email(service: InMemoryUserService, payload: UserInput) -> None:
    """Missing name or email fails with BadRequest and stores nothing."""
    before = service.list_users()

    with pytest.raises(BadRequestError) as exc_info:
        service.create_user(payload)

    assert exc_info.value.status == 400
    assert exc_info.value.message == "Name and email are required"
    assert service.list_users() == before


@pytest.mark.unit
def test_update_replaces_all_fields(service: InMemoryUserService) -> None:
    """Update keeps id and position and clears an omitted age."""
    updated = service.update_user(1, UserInput(name="Alicia", email="alicia@example.com"))

    assert updated == User(id=1, name="Alicia", email="alicia@example.com")
    assert updated.age is None
    assert service.list_users()[0] == updated


@pytest.mark.unit
def test_update_validates_before_lookup(service: InMemoryUserService) -> None:
    """An invalid body on an unknown id is a BadRequest, not NotFound."""
    with pytest.raises(BadRequestError):
        service.update_user(99, UserInput(name="Bob"))


@pytest.mark.unit
def test_update_missing_email_leaves_store_unchanged(service: InMemoryUserService) -> None:
    """A rejected update performs no mutation."""
    before = service.list_users()

    with pytest.raises(BadRequestError):
        service.update_user(1, UserInput(name="Bob"))

    assert service.list_users() == before


@pytest.mark.unit
def test_update_missing_user_raises_not_found(service: InMemoryUserService) -> None:
    """A valid body on an unknown id fails with NotFound."""
    with pytest.raises(NotFoundError):
        service.update_user(42, UserInput(name="X", email="x@x.com"))


@pytest.mark.unit
def test_delete_removes_exactly_one(service: InMemoryUserService) -> None:
    """Delete shrinks the list by one; deleting again fails."""
    service.delete_user(1)

    assert [u.id for u in service.list_users()] == [2]
    with pytest.raises(NotFoundError):
        service.delete_user(1)
    assert len(service.list_users()) == 1


@pytest.mark.unit
def test_list_reflects_insertion_order_after_mutations() -> None:
    """List shows the live set in insertion order."""
    service = InMemoryUserService()
    for name in ("a", "b", "c"):
        service.create_user(UserInput(name=name, email=f"{name}@x.com"))

    service.update_user(1, UserInput(name="A", email="a@x.com", age=1))
    service.delete_user(2)
    service.create_user(UserInput(name="d", email="d@x.com"))

    assert [(u.id, u.name) for u in service.list_users()] == [(1, "A"), (3, "c"), (4, "d")]


@pytest.mark.unit
def test_returned_records_are_copies(service: InMemoryUserService) -> None:
    """Mutating a returned record does not change the store."""
    user = service.get_user(1)
    user.name = "Mallory"

    assert service.get_user(1).name == "Alice"


@pytest.mark.unit
def test_concurrent_creates_assign_unique_ids() -> None:
    """Parallel creates never hand out the same id."""
    service = InMemoryUserService()

    def worker() -> None:
        for _ in range(50):
            service.create_user(UserInput(name="n", email="e@x.com"))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [u.id for u in service.list_users()]
    assert sorted(ids) == list(range(1, 201))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("2", 2),
        ("2abc", 2),
        ("  12", 12),
        ("+3", 3),
        ("-1", -1),
        ("abc", None),
        ("", None),
        ("\u0661", None),
        ("\u06612", None),
        ("\uff13", None),
        (5, 5),
    ],
)
def test_parse_user_id_is_lenient(token: str | int, expected: int | None) -> None:
    """Ids parse from their leading integer prefix."""
    assert parse_user_id(token) == expected


@pytest.mark.unit
def test_lenient_token_resolves_user(service: InMemoryUserService) -> None:
    """A token with trailing characters still finds the user."""
    assert service.get_user("2xyz").name == "Bob"
    with pytest.raises(NotFoundError):
        service.get_user("bob")


@pytest.mark.unit
def test_application_service_is_cached_and_seeded() -> None:
    """The injected service is built once, seeded per settings."""
    from users_api.config import Settings
    from users_api.services import get_user_service, reset_services

    reset_services()
    try:
        seeded = get_user_service(Settings(seed_users=True))
        assert [u.name for u in seeded.list_users()] == ["Alice", "Bob"]
        assert get_user_service(Settings(seed_users=False)) is seeded

        reset_services()
        assert get_user_service(Settings(seed_users=False)).list_users() == []
    finally:
        reset_services()
