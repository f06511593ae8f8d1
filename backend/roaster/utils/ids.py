import uuid


def generate_request_id() -> str:
    return f"roast_{uuid.uuid4().hex[:12]}"
