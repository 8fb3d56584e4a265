from datetime import datetime, timezone

from app.schemas.resource import Resource
from app.utils.resource_page import (
    default_form_values,
    format_quantity,
    render_resource_card,
    render_resources_page,
)


def make_resource(**overrides) -> Resource:
    data = {
        "id": "res-1",
        "name": "First Aid Kits",
        "type": "medicine",
        "quantity": 80,
        "unit": "boxes",
        "status": "allocated",
        "last_updated": datetime(2026, 10, 17, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return Resource(**data)


def test_format_quantity():
    assert format_quantity(500) == "500"
    assert format_quantity(500.0) == "500"
    assert format_quantity(2.5) == "2.5"


def test_card_shows_summary_fields():
    html = render_resource_card(make_resource())

    assert 'data-resource-id="res-1"' in html
    assert "First Aid Kits" in html
    assert '<span class="badge badge-allocated">Allocated</span>' in html
    assert "<dd>medicine</dd>" in html
    assert "80 boxes" in html


def test_card_renders_one_tag_per_condition():
    html = render_resource_card(make_resource(conditions=["sterile", "sealed"]))

    assert html.count('class="condition-tag"') == 2


def test_page_lists_cards_in_order():
    resources = [make_resource(id="a", name="Alpha"), make_resource(id="b", name="Beta")]

    html = render_resources_page(resources)

    assert html.index("Alpha") < html.index("Beta")
    assert "No resources yet." not in html


def test_default_form_values():
    values = default_form_values()

    assert values["type"] == "food"
    assert values["status"] == "available"
    assert values["quantity"] == "0"
    assert values["name"] == values["unit"] == values["conditions"] == ""
