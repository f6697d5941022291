import pytest

from app.api.utils.pagination import paginate, sort_records
from app.api.v1.models.user import User
from app.api.v1.schemas.users import ListingQuery, SortField
from app.api.v1.services.users import UserService


def names(users):
    return [user.name for user in users]


def test_no_sort_keeps_storage_order(five_users):
    result = paginate(five_users, ListingQuery(page=1, size=10))
    assert names(result.items) == ["Jorn", "Markus", "Andrew", "Ori", "Mike"]
    assert result.total_results == 5


def test_sort_by_name(five_users):
    result = paginate(five_users, ListingQuery(page=1, size=10, sort=SortField.NAME))
    assert names(result.items) == ["Andrew", "Jorn", "Markus", "Mike", "Ori"]
    assert result.total_results == 5


def test_sort_by_id(five_users):
    result = paginate(five_users, ListingQuery(page=1, size=2, sort=SortField.ID))
    assert [(u.name, u.id) for u in result.items] == [("Jorn", 0), ("Mike", 1)]
    assert result.total_results == 5


def test_sort_by_id_is_numeric_not_lexicographic():
    users = [User(id=10, name="a"), User(id=9, name="b"), User(id=100, name="c")]
    assert [u.id for u in sort_records(users, SortField.ID)] == [9, 10, 100]


def test_sort_by_name_uses_code_point_order():
    users = [User(id=0, name="bob"), User(id=1, name="Zed"), User(id=2, name="Émile"), User(id=3, name="alice")]
    assert names(sort_records(users, SortField.NAME)) == ["Zed", "alice", "bob", "Émile"]


def test_sort_is_stable_for_equal_keys():
    users = [User(id=3, name="Sam"), User(id=1, name="Ann"), User(id=2, name="Sam"), User(id=0, name="Sam")]
    assert [u.id for u in sort_records(users, SortField.NAME)] == [1, 3, 2, 0]


def test_sorting_does_not_mutate_source(five_users):
    source = list(five_users)
    sort_records(source, SortField.NAME)
    assert source == list(five_users)


def test_resorting_by_id_is_idempotent(five_users):
    once = sort_records(five_users, SortField.ID)
    assert sort_records(once, SortField.ID) == once


def test_last_page_with_fewer_items(five_users):
    result = paginate(five_users, ListingQuery(page=3, size=2))
    assert names(result.items) == ["Mike"]


def test_second_page(five_users):
    result = paginate(five_users, ListingQuery(page=2, size=2))
    assert names(result.items) == ["Andrew", "Ori"]


def test_page_beyond_total_is_empty(five_users):
    result = paginate(five_users, ListingQuery(page=10, size=2))
    assert result.items == []
    assert result.total_results == 5


def test_empty_collection():
    result = paginate((), ListingQuery(page=1, size=10))
    assert result.items == []
    assert result.total_results == 0


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 7])
@pytest.mark.parametrize("page", [1, 2, 3, 4, 6, 50])
def test_page_length_matches_remaining_items(five_users, page, size):
    result = paginate(five_users, ListingQuery(page=page, size=size))
    total = result.total_results
    assert len(result.items) == min(size, max(0, total - (page - 1) * size))


@pytest.mark.parametrize("size", [1, 2, 3])
def test_sorted_pages_are_consistent_across_boundaries(five_users, size):
    pages = []
    page = 1
    while True:
        items = paginate(five_users, ListingQuery(page=page, size=size, sort=SortField.NAME)).items
        if not items:
            break
        pages.append(items)
        page += 1

    for current, following in zip(pages, pages[1:]):
        assert current[-1].name <= following[0].name
    assert names([u for p in pages for u in p]) == names(sort_records(five_users, SortField.NAME))


def test_user_service_list_users(five_users):
    result = UserService.list_users(five_users, ListingQuery(page=1, size=3, sort=SortField.NAME))
    assert names(result.items) == ["Andrew", "Jorn", "Markus"]
    assert result.total_results == 5
