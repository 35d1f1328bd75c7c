"""Link providers: compute URLs for module and option references."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from macrodoc.references import PluginIdentifier


class OptionLike(Enum):
    OPTION = "option"
    RETURN_VALUE = "retval"


class LinkProvider:
    """Base link provider. Returns None for everything."""

    def plugin_link(self, plugin: PluginIdentifier) -> str | None:
        return None

    def plugin_option_like_link(
        self,
        plugin: PluginIdentifier,
        entrypoint: str | None,
        what: OptionLike,
        name: tuple[str, ...],
        current_plugin: bool,
    ) -> str | None:
        return None


class NoLinkProvider(LinkProvider):
    """Provider for renderings that never link anywhere."""


@dataclass(frozen=True, slots=True)
class TemplatedLinkProvider(LinkProvider):
    """Build URLs by filling placeholders into string templates.

    Plugin templates understand ``{plugin_fqcn}``, ``{plugin_fqcn_slashes}``
    and ``{plugin_type}``. Option templates additionally understand
    ``{what}``, ``{entrypoint}``, ``{entrypoint_with_leading_dash}``,
    ``{name_dots}`` and ``{name_slashes}``.
    """

    plugin_link_template: str | None = None
    option_like_link_template: str | None = None

    def plugin_link(self, plugin: PluginIdentifier) -> str | None:
        if self.plugin_link_template is None:
            return None
        return _fill_plugin(self.plugin_link_template, plugin)

    def plugin_option_like_link(
        self,
        plugin: PluginIdentifier,
        entrypoint: str | None,
        what: OptionLike,
        name: tuple[str, ...],
        current_plugin: bool,
    ) -> str | None:
        if self.option_like_link_template is None:
            return None
        url = _fill_plugin(self.option_like_link_template, plugin)
        return (
            url.replace("{what}", what.value)
            .replace("{entrypoint}", entrypoint or "")
            .replace("{entrypoint_with_leading_dash}", f"-{entrypoint}" if entrypoint else "")
            .replace("{name_dots}", ".".join(name))
            .replace("{name_slashes}", "/".join(name))
        )

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> TemplatedLinkProvider:
        """Build a provider from a config mapping (camelCase keys)."""
        plugin_template = config.get("pluginLinkTemplate")
        option_template = config.get("pluginOptionLikeLinkTemplate")
        return cls(
            plugin_link_template=None if plugin_template is None else str(plugin_template),
            option_like_link_template=None if option_template is None else str(option_template),
        )


def _fill_plugin(template: str, plugin: PluginIdentifier) -> str:
    return (
        template.replace("{plugin_fqcn}", plugin.fqcn)
        .replace("{plugin_fqcn_slashes}", plugin.fqcn.replace(".", "/"))
        .replace("{plugin_type}", plugin.type)
    )
