"""
Tests for rentdesk_core: Order, classify, count_all, is_cross_store, sorting, build_view.
"""

from datetime import datetime, timedelta, timezone

import pytest

from rentdesk_core import (
    DEFAULT_SORT,
    Category,
    Order,
    OrderStatus,
    SortDirection,
    SortKey,
    SortState,
    Store,
    build_view,
    classify,
    count_all,
    is_cross_store,
    sort_orders,
)
from rentdesk_core.examples.sample_orders import iso_offset, make_sample_orders
from rentdesk_core.order import ConfirmType

NOW = datetime(2024, 5, 3, 1, 0, 0, tzinfo=timezone.utc)
NAHA = Store(id="S01", name="Naha", time_zone="Asia/Tokyo")
HANEDA = Store(id="S03", name="Haneda", time_zone="Asia/Tokyo")


def _at(hours: float) -> str:
    return iso_offset(NOW, hours)


def _make_order(
    order_id: str = "1",
    status: OrderStatus = OrderStatus.CONFIRMED,
    *,
    create: float = -48,
    update: float = -1,
    pickup: float = 48,
    ret: float = 96,
    **kwargs,
) -> Order:
    """Order with times given as hours relative to NOW."""
    fields = dict(
        id=order_id,
        platform_order_no=f"R{order_id}",
        status=status,
        create_time=_at(create),
        update_time=_at(update),
        pickup_time=_at(pickup),
        pickup_store=NAHA,
        return_time=_at(ret),
        return_store=NAHA,
        car_model="NOTE4.CDAV.Toyota Aqua",
    )
    fields.update(kwargs)
    return Order(**fields)


# --- Order ---


def test_order_coerces_status_token():
    o = _make_order(status="picked_up", confirm_type="instant")
    assert o.status is OrderStatus.PICKED_UP
    assert o.confirm_type is ConfirmType.INSTANT


def test_order_rejects_unknown_status():
    with pytest.raises(ValueError):
        _make_order(status="LOST")


def test_order_immutable():
    o = _make_order()
    with pytest.raises(AttributeError):
        o.status = OrderStatus.CANCELED


# --- classify ---


def test_classify_pending_new_order_scenario():
    o = _make_order(status=OrderStatus.PENDING, create=-0.5, pickup=5)
    expected = {
        Category.ALL: True,
        Category.PENDING: True,
        Category.NEW_24H: True,
        Category.PICKUP_NEXT_24H: True,
        Category.RETURN_TODAY: False,
        Category.OVERDUE_PICKUP: False,
        Category.OVERDUE_RETURN: False,
        Category.CANCELED: False,
    }
    assert {c: classify(o, c, NOW) for c in Category} == expected


def test_classify_overdue_return_not_return_today():
    o = _make_order(status=OrderStatus.PICKED_UP, pickup=-48, ret=-1)
    assert classify(o, Category.OVERDUE_RETURN, NOW) is True
    assert classify(o, Category.RETURN_TODAY, NOW) is False


def test_classify_return_today_requires_picked_up():
    picked = _make_order(status=OrderStatus.PICKED_UP, pickup=-2, ret=10)
    returned = _make_order(status=OrderStatus.RETURNED, pickup=-2, ret=10)
    assert classify(picked, Category.RETURN_TODAY, NOW) is True
    assert classify(returned, Category.RETURN_TODAY, NOW) is False


def test_classify_pickup_next_24h_excludes_canceled():
    canceled = _make_order(status=OrderStatus.CANCELED, pickup=3)
    completed = _make_order(status=OrderStatus.COMPLETED, pickup=3)
    assert classify(canceled, Category.PICKUP_NEXT_24H, NOW) is False
    assert classify(completed, Category.PICKUP_NEXT_24H, NOW) is True


def test_classify_overdue_pickup_statuses():
    for status in OrderStatus:
        o = _make_order(status=status, pickup=-1)
        expected = status in (OrderStatus.PENDING, OrderStatus.CONFIRMED)
        assert classify(o, Category.OVERDUE_PICKUP, NOW) is expected


def test_classify_new_24h_bounds():
    assert classify(_make_order(create=-23.99), Category.NEW_24H, NOW) is True
    assert classify(_make_order(create=-24), Category.NEW_24H, NOW) is False
    # future-dated creation has no lower bound
    assert classify(_make_order(create=5), Category.NEW_24H, NOW) is True


def test_classify_accepts_tokens_and_rejects_unknown():
    o = _make_order(status=OrderStatus.CANCELED)
    assert classify(o, "canceled", NOW) is True
    assert classify(o, "archived", NOW) is False
    assert classify(o, "all", NOW) is True


def test_classify_malformed_times_are_never_in_time_tabs():
    o = _make_order(
        status=OrderStatus.PICKED_UP,
        create_time="not-a-date",
        pickup_time="??",
        return_time="",
    )
    for c in (Category.NEW_24H, Category.PICKUP_NEXT_24H, Category.RETURN_TODAY, Category.OVERDUE_RETURN):
        assert classify(o, c, NOW) is False
    assert classify(o, Category.ALL, NOW) is True


def test_classify_is_total_over_all_statuses():
    for status in OrderStatus:
        o = _make_order(status=status)
        for c in Category:
            assert isinstance(classify(o, c, NOW), bool)


# --- count_all ---


def test_count_all_covers_every_category():
    orders = make_sample_orders(NOW)
    counts = count_all(orders, NOW)
    assert set(counts) == set(Category)
    assert counts[Category.ALL] == len(orders)


def test_count_all_sample_orders():
    counts = count_all(make_sample_orders(NOW), NOW)
    assert counts[Category.PENDING] == 1
    assert counts[Category.NEW_24H] == 3  # ids 6, 4, 5; id 2 was created exactly 24h ago
    assert counts[Category.PICKUP_NEXT_24H] == 1  # id 1; id 2 canceled, id 4 at +26h
    assert counts[Category.RETURN_TODAY] == 0
    assert counts[Category.OVERDUE_PICKUP] == 0
    assert counts[Category.OVERDUE_RETURN] == 0
    assert counts[Category.CANCELED] == 2


def test_count_all_empty():
    counts = count_all([], NOW)
    assert all(v == 0 for v in counts.values())


# --- is_cross_store ---


def test_cross_store_when_vehicle_elsewhere():
    o = _make_order(actual_car="SERENA21", actual_car_current_store=HANEDA)
    assert is_cross_store(o) is True


def test_cross_store_same_store():
    o = _make_order(actual_car="AQUA-8821", actual_car_current_store=NAHA)
    assert is_cross_store(o) is False


def test_cross_store_ignores_stale_store_without_car():
    o = _make_order(actual_car=None, actual_car_current_store=HANEDA)
    assert is_cross_store(o) is False
    o = _make_order(actual_car="", actual_car_current_store=HANEDA)
    assert is_cross_store(o) is False


def test_cross_store_requires_vehicle_store():
    o = _make_order(actual_car="SERENA21", actual_car_current_store=None)
    assert is_cross_store(o) is False


# --- sort_orders ---


def test_sort_by_pickup_asc_and_desc():
    a = _make_order("a", pickup=10)
    b = _make_order("b", pickup=-5)
    c = _make_order("c", pickup=30)
    assert [o.id for o in sort_orders([a, b, c], SortKey.PICKUP_TIME, SortDirection.ASC)] == ["b", "a", "c"]
    assert [o.id for o in sort_orders([a, b, c], "pickupTime", "desc")] == ["c", "a", "b"]


def test_sort_asc_reversed_equals_desc_without_ties():
    orders = [_make_order(str(i), create=-h) for i, h in enumerate([5, 1, 9, 3, 7])]
    asc = sort_orders(orders, SortKey.CREATE_TIME, SortDirection.ASC)
    desc = sort_orders(orders, SortKey.CREATE_TIME, SortDirection.DESC)
    assert list(reversed(asc)) == desc


def test_sort_is_stable_on_equal_keys():
    orders = [_make_order(str(i), update=-3) for i in range(5)]
    for direction in SortDirection:
        out = sort_orders(orders, SortKey.UPDATE_TIME, direction)
        assert [o.id for o in out] == ["0", "1", "2", "3", "4"]


def test_sort_identical_update_time_desc_keeps_input_order():
    first = _make_order("first", update=-2)
    newest = _make_order("newest", update=-1)
    second = _make_order("second", update=-2)
    out = sort_orders([first, newest, second], SortKey.UPDATE_TIME, SortDirection.DESC)
    assert [o.id for o in out] == ["newest", "first", "second"]


def test_sort_malformed_values_sort_as_epoch():
    bad = _make_order("bad", pickup_time="garbage")
    good = _make_order("good", pickup=-1000)
    out = sort_orders([good, bad], SortKey.PICKUP_TIME, SortDirection.ASC)
    assert [o.id for o in out] == ["bad", "good"]


def test_sort_does_not_mutate_input():
    orders = [_make_order("x", update=-1), _make_order("y", update=-2)]
    snapshot = list(orders)
    sort_orders(orders, SortKey.UPDATE_TIME, SortDirection.ASC)
    assert orders == snapshot


def test_sort_unknown_key_raises():
    with pytest.raises(ValueError):
        sort_orders([], "cancelTime", SortDirection.ASC)


# --- SortState ---


def test_default_sort_is_update_time_desc():
    assert DEFAULT_SORT == SortState(SortKey.UPDATE_TIME, SortDirection.DESC)


def test_select_same_key_flips_direction():
    s = DEFAULT_SORT.select(SortKey.UPDATE_TIME)
    assert s.direction is SortDirection.ASC
    assert s.select("updateTime").direction is SortDirection.DESC


def test_select_new_key_resets_to_desc():
    s = SortState(SortKey.CREATE_TIME, SortDirection.ASC).select(SortKey.RETURN_TIME)
    assert s == SortState(SortKey.RETURN_TIME, SortDirection.DESC)


# --- build_view ---


def test_build_view_filters_then_sorts():
    orders = make_sample_orders(NOW)
    view = build_view(orders, Category.CANCELED, SortKey.UPDATE_TIME, SortDirection.DESC, NOW)
    assert [o.id for o in view] == ["2", "3"]
    view = build_view(orders, "canceled", "updateTime", "asc", NOW)
    assert [o.id for o in view] == ["3", "2"]


def test_build_view_all_default_sort():
    orders = make_sample_orders(NOW)
    view = build_view(orders, Category.ALL, DEFAULT_SORT.key, DEFAULT_SORT.direction, NOW)
    assert [o.id for o in view] == ["5", "6", "4", "2", "1", "3"]


def test_build_view_unknown_category_is_empty():
    orders = make_sample_orders(NOW)
    assert build_view(orders, "archived", SortKey.UPDATE_TIME, SortDirection.DESC, NOW) == []


def test_build_view_is_repeatable():
    orders = make_sample_orders(NOW)
    first = build_view(orders, Category.NEW_24H, SortKey.CREATE_TIME, SortDirection.ASC, NOW)
    second = build_view(orders, Category.NEW_24H, SortKey.CREATE_TIME, SortDirection.ASC, NOW)
    assert first == second
    assert [o.id for o in orders] == ["1", "6", "2", "3", "4", "5"]


# --- out-of-range instants ---

UNREPRESENTABLE = "0001-01-01T00:00:00+05:00"


def test_classify_out_of_range_instants_are_never_in_time_tabs():
    o = _make_order(
        status=OrderStatus.PICKED_UP,
        create_time=UNREPRESENTABLE,
        pickup_time=UNREPRESENTABLE,
        return_time=UNREPRESENTABLE,
    )
    for c in (Category.NEW_24H, Category.PICKUP_NEXT_24H, Category.RETURN_TODAY, Category.OVERDUE_RETURN):
        assert classify(o, c, NOW) is False


def test_count_all_survives_out_of_range_instant():
    bad = _make_order("bad", status=OrderStatus.PENDING, create_time=UNREPRESENTABLE)
    good = _make_order("good", status=OrderStatus.PENDING, create=-1)
    counts = count_all([bad, good], NOW)
    assert counts[Category.ALL] == 2
    assert counts[Category.PENDING] == 2
    assert counts[Category.NEW_24H] == 1


def test_sort_out_of_range_instant_sorts_as_epoch():
    bad = _make_order("bad", update_time=UNREPRESENTABLE)
    good = _make_order("good", update=-1)
    out = sort_orders([good, bad], SortKey.UPDATE_TIME, "asc")
    assert [o.id for o in out] == ["bad", "good"]
    view = build_view([good, bad], Category.ALL, SortKey.UPDATE_TIME, SortDirection.DESC, NOW)
    assert [o.id for o in view] == ["good", "bad"]
