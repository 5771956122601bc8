from typing import Any, Dict, Mapping

# module foodparadise.utils.validators
def id_as_text(value: Any) -> Any:
    """Identifiant numérique (int8 Supabase) -> texte; les autres valeurs passent telles quelles."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value

def rename_keys(row: Mapping[str, Any], mapping: Mapping[str, str]) -> Dict[str, Any]:
    """Copie d'une ligne de stockage avec les colonnes renommées vers les clés JSON du client."""
    return {mapping.get(k, k): v for k, v in row.items()}
