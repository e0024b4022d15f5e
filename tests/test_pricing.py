import pytest
from storefront_client.pricing import (
    cart_summary,
    effective_price,
    filter_by_price_range,
    format_price,
    parse_price,
    sort_products,
)


def product(pid, price, sale=None, created='2024-01-01T00:00:00'):
    return {'id': pid, 'price': price, 'salePrice': sale, 'createdAt': created}


def test_effective_price_prefers_sale():
    assert effective_price(product('a', 60000, 44500)) == 44500
    assert effective_price(product('b', 60000)) == 60000


@pytest.mark.parametrize('amount,text', [(44500, '44,500 XAF'), (0, '0 XAF'), (1250000, '1,250,000 XAF')])
def test_format_price(amount, text):
    assert format_price(amount) == text
    assert parse_price(text) == amount


def test_filter_by_price_range_is_inclusive():
    items = [product('a', 10000), product('b', 60000, 20000), product('c', 30001)]
    kept = filter_by_price_range(items, 10000, 30000)
    assert [p['id'] for p in kept] == ['a', 'b']


def test_sort_products():
    items = [
        product('old', 30000, created='2024-01-01T00:00:00'),
        product('new', 50000, 10000, created='2024-03-01T00:00:00'),
        product('mid', 20000, created='2024-02-01T00:00:00'),
    ]
    assert [p['id'] for p in sort_products(items)] == ['new', 'mid', 'old']
    assert [p['id'] for p in sort_products(items, 'price-low')] == ['new', 'mid', 'old']
    assert [p['id'] for p in sort_products(items, 'price-high')] == ['old', 'mid', 'new']


def test_cart_summary_below_threshold():
    lines = [{'product': product('a', 47500), 'quantity': 1}]
    assert cart_summary(lines) == {
        'subtotal': 47500,
        'shipping': 7500,
        'total': 55000,
        'missingForFreeShipping': 2500,
    }


def test_cart_summary_at_threshold():
    lines = [{'product': product('a', 30000, 25000), 'quantity': 2}]
    summary = cart_summary(lines)
    assert summary['shipping'] == 0
    assert summary['total'] == 50000
    assert summary['missingForFreeShipping'] == 0
