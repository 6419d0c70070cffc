import hashlib

def normalize_text(text: str) -> str:
    """
    Minimal normalization used before keyword matching:
    - trim whitespace
    - lowercase
    - collapse multiple spaces
    """
    return " ".join(text.strip().lower().split())

def format_inr(amount: int) -> str:
    """
    Format a whole-rupee amount with Indian digit grouping,
    e.g. 57620000 -> '₹5,76,20,000'.
    """
    sign = "-" if amount < 0 else ""
    digits = str(abs(int(amount)))
    if len(digits) <= 3:
        return f"{sign}₹{digits}"
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"{sign}₹{','.join(groups)},{tail}"

def weak_etag(payload_bytes: bytes) -> str:
    """Weak ETag for client-side conditional requests."""
    h = hashlib.sha256(payload_bytes).hexdigest()[:24]
    return f'W/"{h}"'
