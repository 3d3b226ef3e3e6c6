"""
Sample orders for demos and tests.

Times are generated relative to a reference instant so every category has
members whenever the samples are built. One order has a vehicle parked at
another store.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from rentdesk_core.order import ConfirmType, Order, OrderStatus
from rentdesk_core.store import Store
from rentdesk_core.timefmt import parse_instant, utc_now

NAHA_STORE = Store(id="S01", name="IX樱花租车-那霸空港店", time_zone="Asia/Tokyo")
FUKUOKA_STORE = Store(id="S02", name="IX樱花租车-福冈店", time_zone="Asia/Tokyo")
HANEDA_STORE = Store(id="S03", name="羽田空港店", time_zone="Asia/Tokyo")

SAMPLE_STORES = (NAHA_STORE, FUKUOKA_STORE, HANEDA_STORE)


def iso_offset(now: datetime, hours: float) -> str:
    """UTC ISO 8601 string (millisecond precision, Z suffix) at now + hours."""
    dt = (now + timedelta(hours=hours)).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_sample_orders(now: datetime | None = None) -> list[Order]:
    """Build the sample collection around now (wall clock if omitted)."""
    ref = parse_instant(now) if now is not None else utc_now()

    def at(hours: float) -> str:
        return iso_offset(ref, hours)

    return [
        Order(
            id="1",
            platform_order_no="R745009384698629",
            status=OrderStatus.CONFIRMED,
            update_time=at(-2),
            create_time=at(-48),
            confirm_time=at(-47.5),
            confirm_type=ConfirmType.INSTANT,
            pickup_time=at(5),
            pickup_store=NAHA_STORE,
            return_time=at(5 + 48),
            return_store=NAHA_STORE,
            car_model="NOTE4.CDAV.Toyota Aqua",
            actual_car="AQUA-8821",
            actual_car_current_store=NAHA_STORE,
            customer_name="kwon ginam",
            amount=39.2,
            currency="USD",
            payment_status="Prepaid",
            source="klook",
        ),
        Order(
            id="6",
            platform_order_no="R746001122334455",
            status=OrderStatus.PENDING,
            update_time=at(-0.2),
            create_time=at(-0.2),
            pickup_time=at(48),
            pickup_store=NAHA_STORE,
            return_time=at(48 + 72),
            return_store=NAHA_STORE,
            car_model="W1.FDAR.Toyota Alphard",
            customer_name="Pending User",
            amount=300.0,
            currency="USD",
            payment_status="Prepaid",
            source="trip.com",
            remarks="Needs baby seat",
        ),
        Order(
            id="2",
            platform_order_no="R744154708988677",
            status=OrderStatus.CANCELED,
            update_time=at(-1),
            cancel_time=at(-1),
            create_time=at(-24),
            confirm_time=at(-23.8),
            confirm_type=ConfirmType.SECONDARY,
            pickup_time=at(20),
            pickup_store=FUKUOKA_STORE,
            return_time=at(20 + 72),
            return_store=FUKUOKA_STORE,
            car_model="CSFT2.MCAV.Honda N-BOX",
            customer_name="lun yuen ting",
            amount=38.0,
            currency="USD",
            payment_status="Refunded",
            source="klook",
        ),
        Order(
            id="3",
            platform_order_no="R744054233342725",
            status=OrderStatus.CANCELED,
            update_time=at(-25),
            cancel_time=at(-25),
            create_time=at(-100),
            confirm_time=at(-99),
            confirm_type=ConfirmType.INSTANT,
            pickup_time=at(-10),
            pickup_store=NAHA_STORE,
            return_time=at(30),
            return_store=NAHA_STORE,
            car_model="CSAQ5.CDAV.Toyota Aqua",
            customer_name="Wong Angela",
            amount=119.0,
            currency="USD",
            payment_status="Refunded",
            source="klook",
        ),
        Order(
            id="4",
            platform_order_no="R743583524643141",
            status=OrderStatus.CONFIRMED,
            update_time=at(-0.5),
            create_time=at(-5),
            confirm_time=at(-4.5),
            confirm_type=ConfirmType.SECONDARY,
            pickup_time=at(26),
            pickup_store=NAHA_STORE,
            return_time=at(26 + 96),
            return_store=NAHA_STORE,
            car_model="NOTE3.MCAV.Honda N-BOX",
            customer_name="Bryan Altaker",
            amount=91.8,
            currency="USD",
            payment_status="Pay on Arrival",
            source="economybooking",
        ),
        Order(
            id="5",
            platform_order_no="R743999999999999",
            status=OrderStatus.PICKED_UP,
            update_time=at(-0.1),
            create_time=at(-10),
            confirm_time=at(-9.9),
            confirm_type=ConfirmType.INSTANT,
            pickup_time=at(-0.1),
            pickup_store=NAHA_STORE,
            return_time=at(48),
            return_store=NAHA_STORE,
            car_model="W1.FDAR.Toyota Alphard",
            actual_car="SERENA21",
            actual_car_current_store=HANEDA_STORE,
            customer_name="Zhang San",
            amount=250.0,
            currency="USD",
            payment_status="Paid",
            source="trip.com",
        ),
    ]
