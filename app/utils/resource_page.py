# app/utils/resource_page.py
from html import escape
from typing import Iterable, Mapping, Optional

from app.models.resource import ResourceStatus, ResourceType
from app.schemas.resource import Resource

PAGE_PATH = "/admin/resources"

STATUS_BADGE_CLASSES = {
    ResourceStatus.AVAILABLE: "badge badge-available",
    ResourceStatus.ALLOCATED: "badge badge-allocated",
    ResourceStatus.DEPLETED: "badge badge-depleted",
}

PAGE_STYLES = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif; margin: 0; padding: 24px; background-color: #f5f7fb; color: #333333; }
    .page-header { display: flex; justify-content: space-between; align-items: center; }
    .resource-grid { display: grid; gap: 16px; margin-top: 24px; }
    .resource-card { background-color: #ffffff; border-radius: 8px; padding: 16px 20px; box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08); }
    .resource-card header { display: flex; justify-content: space-between; align-items: center; }
    .resource-card h2 { font-size: 20px; margin: 0; }
    .resource-details { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; margin: 16px 0 0; }
    .resource-details dt { font-size: 13px; color: #6b7280; }
    .resource-details dd { margin: 0; font-weight: 600; }
    .resource-conditions, .resource-expiry { grid-column: span 2; }
    .badge { padding: 4px 8px; border-radius: 9999px; font-size: 13px; }
    .badge-available { background-color: #dcfce7; color: #166534; }
    .badge-allocated { background-color: #fef9c3; color: #854d0e; }
    .badge-depleted { background-color: #fee2e2; color: #991b1b; }
    .condition-tag { display: inline-block; padding: 4px 8px; margin-right: 8px; border-radius: 9999px; background-color: #e5e7eb; font-size: 12px; }
    .form-errors { color: #991b1b; }
    dialog form div { margin-bottom: 12px; }
    dialog label { display: block; font-size: 13px; }
"""


def default_form_values() -> dict[str, str]:
    """Values a freshly opened creation form starts with."""
    return {
        "name": "",
        "type": ResourceType.FOOD.value,
        "quantity": "0",
        "unit": "",
        "status": ResourceStatus.AVAILABLE.value,
        "expiry_date": "",
        "conditions": "",
    }


def format_quantity(quantity: int | float) -> str:
    if isinstance(quantity, float) and quantity.is_integer():
        return str(int(quantity))
    return str(quantity)


def _options(values: Iterable[str], selected: Optional[str], blank: Optional[str] = None) -> str:
    options = []
    if blank is not None:
        options.append(f'<option value="">{escape(blank)}</option>')
    for value in values:
        selected_attr = " selected" if value == selected else ""
        options.append(
            f'<option value="{escape(value)}"{selected_attr}>{escape(value.capitalize())}</option>'
        )
    return "".join(options)


def render_resource_card(resource: Resource) -> str:
    conditions_block = ""
    if resource.conditions:
        tags = "".join(
            f'<span class="condition-tag">{escape(condition)}</span>'
            for condition in resource.conditions
        )
        conditions_block = f"""
            <div class="resource-conditions">
                <dt>Conditions</dt>
                <dd>{tags}</dd>
            </div>"""

    expiry_block = ""
    if resource.expiry_date:
        expiry_block = f"""
            <div class="resource-expiry">
                <dt>Expiry Date</dt>
                <dd>{resource.expiry_date.isoformat()}</dd>
            </div>"""

    return f"""
    <article class="resource-card" data-resource-id="{escape(resource.id)}">
        <header>
            <h2 class="resource-name">{escape(resource.name)}</h2>
            <span class="{STATUS_BADGE_CLASSES[resource.status]}">{resource.status.label}</span>
        </header>
        <dl class="resource-details">
            <div>
                <dt>Type</dt>
                <dd>{escape(resource.type.value)}</dd>
            </div>
            <div>
                <dt>Quantity</dt>
                <dd>{format_quantity(resource.quantity)} {escape(resource.unit)}</dd>
            </div>{conditions_block}{expiry_block}
        </dl>
    </article>"""


def render_resource_form(
    values: Mapping[str, str],
    errors: Optional[list[str]] = None,
) -> str:
    """
    The "Add New Resource" dialog. There are no inputs for location or
    organization; those keep their defaults.
    """
    error_section = ""
    if errors:
        items = "".join(f"<li>{escape(message)}</li>" for message in errors)
        error_section = f'<ul class="form-errors">{items}</ul>'

    return f"""
    <dialog id="add-resource-dialog" open>
        <h2>Add New Resource</h2>
        {error_section}
        <form method="post" action="{PAGE_PATH}">
            <div>
                <label for="name">Name</label>
                <input id="name" name="name" value="{escape(values.get("name", ""))}" required>
            </div>
            <div>
                <label for="type">Type</label>
                <select id="type" name="type">{_options((t.value for t in ResourceType), values.get("type"))}</select>
            </div>
            <div>
                <label for="quantity">Quantity</label>
                <input id="quantity" name="quantity" type="number" step="any" value="{escape(values.get("quantity", ""))}" required>
            </div>
            <div>
                <label for="unit">Unit</label>
                <input id="unit" name="unit" value="{escape(values.get("unit", ""))}" required>
            </div>
            <div>
                <label for="status">Status</label>
                <select id="status" name="status">{_options((s.value for s in ResourceStatus), values.get("status"))}</select>
            </div>
            <div>
                <label for="expiry_date">Expiry Date</label>
                <input id="expiry_date" name="expiry_date" type="date" value="{escape(values.get("expiry_date", ""))}">
            </div>
            <div>
                <label for="conditions">Conditions</label>
                <input id="conditions" name="conditions" value="{escape(values.get("conditions", ""))}" placeholder="Enter conditions separated by commas">
            </div>
            <button type="submit">Add Resource</button>
            <a href="{PAGE_PATH}">Cancel</a>
        </form>
    </dialog>"""


def render_resources_page(
    resources: list[Resource],
    dialog_open: bool = False,
    form_values: Optional[Mapping[str, str]] = None,
    errors: Optional[list[str]] = None,
    status_filter: Optional[ResourceStatus] = None,
    type_filter: Optional[ResourceType] = None,
) -> str:
    """
    Render the full Resource Management page: header with filter and
    "Add Resource" controls, one card per resource, and the creation
    dialog when it is open.
    """
    if resources:
        cards = "".join(render_resource_card(resource) for resource in resources)
    else:
        cards = '<p class="empty-state">No resources yet.</p>'

    dialog = ""
    if dialog_open:
        dialog = render_resource_form(form_values or default_form_values(), errors)

    status_options = _options(
        (s.value for s in ResourceStatus),
        status_filter.value if status_filter else None,
        blank="All statuses",
    )
    type_options = _options(
        (t.value for t in ResourceType),
        type_filter.value if type_filter else None,
        blank="All types",
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Resource Management</title>
    <style>{PAGE_STYLES}</style>
</head>
<body>
    <div class="page-header">
        <h1>Resource Management</h1>
        <div class="page-actions">
            <form method="get" action="{PAGE_PATH}" class="filter-form">
                <select name="status">{status_options}</select>
                <select name="type">{type_options}</select>
                <button type="submit">Filter</button>
            </form>
            <a class="add-resource" href="{PAGE_PATH}?dialog=add">Add Resource</a>
        </div>
    </div>
    <section class="resource-grid">{cards}
    </section>{dialog}
</body>
</html>
"""
