from typing import Any, List, Optional


_TRAVERSAL_ERRORS = (KeyError, IndexError, TypeError, AttributeError, ValueError)


def _step_into(current: Any, key: str) -> Any:
    if isinstance(current, dict):
        return current.get(key)
    if isinstance(current, (list, tuple)):
        # Como em JS: "0" indexa listas, qualquer outra chave é ausente
        if key.isdigit():
            index = int(key)
            return current[index] if index < len(current) else None
        return None
    return None


def get_nested_value(obj: Any, path: str, default: Any = "unknown") -> Any:
    """
    Acessa um campo aninhado do payload usando caminho com pontos (ex: 'media.status').

    Qualquer segmento ausente/None devolve `default`, sem lançar exceção.

    Atenção: valores presentes mas "falsy" ('', 0, False) também viram `default`.
    Esse comportamento é herdado do proxy antigo e mantido por compatibilidade,
    não é um contrato desejado (um status vazio vira 'unknown', não '').
    """
    try:
        current = obj
        for key in path.split('.'):
            if current is None:
                return default
            current = _step_into(current, key)
        return current or default
    except _TRAVERSAL_ERRORS:
        return default


def env_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() == "true"


def parse_recipients(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


def normalize_signal_url(url: Optional[str], send_path: str) -> Optional[str]:
    """Remove barras finais e garante que a URL termine no caminho de envio."""
    if not url or not url.strip():
        return None
    url = url.strip().rstrip('/')
    if not url.endswith(send_path):
        url = f"{url}{send_path}"
    return url


def strip_signal_path(send_url: Optional[str], send_path: str) -> Optional[str]:
    if not send_url:
        return None
    if send_url.endswith(send_path):
        return send_url[: -len(send_path)]
    return send_url
