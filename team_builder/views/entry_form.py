# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
View: the add-member form.
Every input's value attribute is bound to the matching Draft field, so the
rendered form always mirrors the Draft.
"""

from html import escape

from team_builder.models.domain import Draft, DraftField

# (field, label, input type)
FORM_FIELDS: tuple[tuple[DraftField, str, str], ...] = (
    (DraftField.NAME, "Name", "text"),
    (DraftField.EMAIL, "Email", "email"),
    (DraftField.ROLE, "Role", "text"),
)


def render_entry_form(draft: Draft) -> str:
    inputs = []
    for field, label, input_type in FORM_FIELDS:
        value = getattr(draft, field.value)
        inputs.append(
            f'<label for="{field.value}">{label}</label>'
            f'<input id="{field.value}" name="{field.value}" type="{input_type}" '
            f'value="{escape(value, quote=True)}" oninput="teamBuilder.change(event)">'
        )
    return (
        '<div class="form" id="entry-form">'
        "<h2>Add a Team Member</h2>"
        '<form onsubmit="teamBuilder.submit(event)">'
        + "".join(inputs)
        + '<button type="submit">Submit</button>'
        "</form>"
        "</div>"
    )
