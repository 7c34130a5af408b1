"""
Registro de templates de tela do Flow.

O conteúdo das telas é configuração: trocar textos ou IDs de tela não exige
alterar a lógica de despacho. O registro padrão vem de default_screens.yaml e
pode ser substituído por outro arquivo (FLOW_SCREENS_PATH) ou injetado em testes.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from fsm.types.payload import ScreenResponse

DEFAULT_SCREENS_PATH = Path(__file__).resolve().parent / "default_screens.yaml"


@dataclass(frozen=True, slots=True)
class ScreenRegistry:
    """
    Templates das três telas do Flow.

    Attributes:
        entry: Tela inicial (resposta ao INIT)
        intermediate: Tela de confirmação (resposta ao envio da entrada)
        success: Tela terminal; recebe o flow_token em extension_message_response.params
        required_fields: Campos obrigatórios no data_exchange da tela de entrada
        email_fields: Campos da tela de entrada que precisam ser e-mail válido
        choice_fields: Valores aceitos por campo no envio da tela intermediária
    """

    entry: ScreenResponse
    intermediate: ScreenResponse
    success: ScreenResponse
    required_fields: tuple[str, ...] = ()
    email_fields: tuple[str, ...] = ()
    choice_fields: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        screens = [self.entry.screen, self.intermediate.screen, self.success.screen]
        if len(set(screens)) != len(screens):
            raise ValueError(f"IDs de tela duplicados: {screens}")
        _check_success_params(self.success.data)

    def entry_response(self) -> dict[str, Any]:
        return self.entry.to_dict()

    def intermediate_response(self) -> dict[str, Any]:
        return self.intermediate.to_dict()

    def success_response(self, flow_token: str) -> dict[str, Any]:
        """Template de sucesso com o flow_token do request nos params."""
        response = self.success.to_dict()
        extension = response["data"].setdefault("extension_message_response", {})
        extension.setdefault("params", {})["flow_token"] = flow_token
        return response

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> ScreenRegistry:
        """
        Constrói o registro a partir de um dict (ex: YAML carregado).

        Raises:
            ValueError: Se faltar alguma tela ou campos tiverem tipo inválido
        """
        if not isinstance(raw, dict):
            raise ValueError("Registro de telas deve ser um mapeamento")

        templates: dict[str, ScreenResponse] = {}
        for name in ("entry", "intermediate", "success"):
            section = raw.get(name)
            if not isinstance(section, dict):
                raise ValueError(f"Tela '{name}' ausente no registro")
            screen = section.get("screen")
            if not isinstance(screen, str) or not screen:
                raise ValueError(f"Tela '{name}' sem identificador")
            data = section.get("data")
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ValueError(f"Tela '{name}' com data inválido")
            templates[name] = ScreenResponse(screen=screen, data=copy.deepcopy(data))

        return cls(
            entry=templates["entry"],
            intermediate=templates["intermediate"],
            success=templates["success"],
            required_fields=_field_names(raw["entry"], "required_fields"),
            email_fields=_field_names(raw["entry"], "email_fields"),
            choice_fields=_choices(raw["intermediate"].get("choice_fields")),
        )


def _check_success_params(data: dict[str, Any]) -> None:
    # success_response escreve o flow_token em extension_message_response.params
    extension = data.get("extension_message_response")
    if extension is None:
        return
    if not isinstance(extension, dict):
        raise ValueError("success.data.extension_message_response deve ser um mapeamento")
    params = extension.get("params")
    if params is not None and not isinstance(params, dict):
        raise ValueError("success.data.extension_message_response.params deve ser um mapeamento")


def _field_names(section: dict[str, Any], key: str) -> tuple[str, ...]:
    names = section.get(key)
    if names is None:
        return ()
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"entry.{key} deve ser lista de strings")
    return tuple(names)


def _choices(raw: Any) -> dict[str, tuple[str, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("intermediate.choice_fields deve ser um mapeamento")
    choices: dict[str, tuple[str, ...]] = {}
    for name, values in raw.items():
        if not isinstance(values, list) or not values or not all(isinstance(v, str) for v in values):
            raise ValueError(f"intermediate.choice_fields.{name} deve ser lista de strings")
        choices[str(name)] = tuple(values)
    return choices


def load_screen_registry(path: str | Path | None = None) -> ScreenRegistry:
    """
    Carrega o registro de telas de um arquivo YAML.

    Args:
        path: Caminho do YAML (usa default_screens.yaml se None)

    Raises:
        ValueError: Se o arquivo não existir ou for inválido
    """
    screens_path = Path(path) if path else DEFAULT_SCREENS_PATH
    try:
        raw = yaml.safe_load(screens_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ValueError(f"Falha ao carregar telas de {screens_path}: {exc}") from exc
    return ScreenRegistry.from_mapping(raw)


@lru_cache(maxsize=1)
def get_default_registry() -> ScreenRegistry:
    """Retorna registro padrão cacheado."""
    return load_screen_registry()
