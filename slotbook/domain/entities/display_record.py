from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayRecord:
    reservation_id: str
    service_label: str
    datetime: str
    created_at_line: str | None = None
    placeholder: bool = False
