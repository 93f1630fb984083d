# namecraft/utils/ids.py
import uuid

def generate_id() -> str:
    """Random identifier for new records"""
    return str(uuid.uuid4())
