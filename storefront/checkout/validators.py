"""
storefront/checkout/validators.py
---------------------------------
Input-layer validation for the checkout form.
Returns a dict of field -> error_message.
An empty dict means all fields are valid.

Only presence is checked, matching the `required` attributes on the form
inputs. The order logic itself never validates contact details.
"""

REQUIRED_FIELDS = {
    'name':    'Name is required.',
    'email':   'Email is required.',
    'phone':   'Phone is required.',
    'address': 'Delivery address is required.',
}


def validate_order_form(form_data) -> dict:
    """
    Validate raw checkout form data.

    Args:
        form_data: mapping of raw string values (request.form or a dict)

    Returns:
        dict of {field_name: error_message}, empty if all present.
    """
    errors = {}
    for field, message in REQUIRED_FIELDS.items():
        if not (form_data.get(field) or '').strip():
            errors[field] = message
    return errors


def parse_order_form(form_data) -> dict:
    """
    Pick the known checkout fields out of raw form data, stripped.
    Missing fields come back as ''.
    """
    return {field: (form_data.get(field) or '').strip() for field in REQUIRED_FIELDS}
