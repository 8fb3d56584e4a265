# app/utils/id_generators.py
import uuid


def generate_resource_id() -> str:
    """
    Generate a resource identifier.

    UUID4 in canonical string form, e.g. "3f2b8c1e-9d4a-4e1b-8a77-0c5d2e6f9a10".
    Generated server-side so no client-supplied id is ever trusted.
    """
    return str(uuid.uuid4())
