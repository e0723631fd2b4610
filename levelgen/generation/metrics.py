from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'attempts': 0,
        'relaxed_attempts': 0,
        'rejections': {},
        'rooms_placed': 0,
        'fallback_used': False,
        'fallback_verified': False,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }


def record_rejection(metrics: Dict[str, Any], reason: str) -> None:
    if not metrics:
        return
    rejections = metrics['rejections']
    rejections[reason] = rejections.get(reason, 0) + 1
