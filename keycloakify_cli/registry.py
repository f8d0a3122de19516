"""Registry of the option tokens recognized by the catalog's commands."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from keycloakify_cli.catalog import CommandCatalog


class OptionRegistryBuilder:
    """Collects option tokens while the catalog is being assembled."""

    def __init__(self) -> None:
        self._tokens: List[str] = []
        self._owners: Dict[str, set] = {}
        self._global: set = set()

    def register(self, flag_name: str, command: Optional[str] = None) -> None:
        """Append ``flag_name``; ``command=None`` makes it accepted by every command."""
        self._tokens.append(flag_name)
        if command is None:
            self._global.add(flag_name)
        else:
            self._owners.setdefault(flag_name, set()).add(command)

    def freeze(self) -> "OptionRegistry":
        return OptionRegistry(
            tokens=tuple(dict.fromkeys(self._tokens)),
            global_tokens=frozenset(self._global),
            owners={token: frozenset(names) for token, names in self._owners.items()},
        )


class OptionRegistry:
    """Immutable view of the registered option tokens.

    Tokens are stored without their leading dashes (``project``, ``p``).
    """

    def __init__(
        self,
        tokens: Tuple[str, ...],
        global_tokens: FrozenSet[str],
        owners: Mapping[str, FrozenSet[str]],
    ) -> None:
        self._tokens = tokens
        self._global = global_tokens
        self._owners = MappingProxyType(dict(owners))

    @classmethod
    def from_catalog(cls, catalog: "CommandCatalog") -> "OptionRegistry":
        builder = OptionRegistryBuilder()
        for option in catalog.global_options:
            for name in option.names:
                builder.register(name)
        for command in catalog:
            for option in command.options:
                for name in option.names:
                    builder.register(name, command=command.name)
        return builder.freeze()

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def has(self, flag_name: str) -> bool:
        return flag_name in self._global or flag_name in self._owners

    def accepts(self, command: str, flag_name: str) -> bool:
        if flag_name in self._global:
            return True
        return command in self._owners.get(flag_name, frozenset())

    def accepted_by(self, command: str) -> FrozenSet[str]:
        return frozenset(t for t in self._tokens if self.accepts(command, t))

    def __contains__(self, flag_name: object) -> bool:
        return isinstance(flag_name, str) and self.has(flag_name)

    def __len__(self) -> int:
        return len(self._tokens)
