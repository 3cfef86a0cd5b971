"""The ``generate_bepinex_plugin`` tool: a BepInEx/Harmony plugin skeleton.

Templates use :class:`string.Template` (``$name`` / ``${name}`` syntax).
"""

from __future__ import annotations

from string import Template
from typing import TYPE_CHECKING, Any

from asmscope.protocols.mcp.models import CallToolResult

if TYPE_CHECKING:
    from asmscope.tools.arguments import ToolArguments

_PLUGIN_TEMPLATE = Template(
    """\
using BepInEx;
using BepInEx.Logging;
using HarmonyLib;
using System;

namespace ${name}
{
    [BepInPlugin("${guid}", "${name}", "1.0.0")]
    public class ${name}Plugin : BaseUnityPlugin
    {
        private static ManualLogSource Log;
        private Harmony harmony;

        private void Awake()
        {
            Log = Logger;
            Log.LogInfo("${name} is loading...");

            harmony = new Harmony("${guid}");
            harmony.PatchAll();

            Log.LogInfo("${name} loaded successfully!");
        }

        private void OnDestroy()
        {
            harmony?.UnpatchSelf();
        }
    }
${hooks}}
"""
)

_HOOK_TEMPLATE = Template(
    """
    [HarmonyPatch(typeof(${type_name}), "${method_name}")]
    class ${class_name}
    {
        static void Prefix()
        {
            // Add your code before ${method_name} executes
        }

        static void Postfix()
        {
            // Add your code after ${method_name} executes
        }
    }
"""
)


def render_plugin(name: str, guid: str, hooks: list[Any]) -> str:
    """Render the plugin source.

    Hooks lacking a string ``type_name`` or ``method_name`` are skipped.
    """
    patches = [_render_hook(hook) for hook in hooks]
    rendered = "".join(p for p in patches if p)
    if rendered:
        rendered = "\n" + rendered
    return _PLUGIN_TEMPLATE.substitute(name=name, guid=guid, hooks=rendered)


def _render_hook(hook: Any) -> str | None:
    if not isinstance(hook, dict):
        return None
    type_name = hook.get("type_name")
    method_name = hook.get("method_name")
    if not isinstance(type_name, str) or not isinstance(method_name, str):
        return None
    return _HOOK_TEMPLATE.substitute(
        type_name=type_name,
        method_name=method_name,
        class_name=f"{type_name.replace('.', '_')}_{method_name}_Patch",
    )


def generate_bepinex_plugin(args: ToolArguments) -> CallToolResult:
    name = args.require_str("plugin_name")
    guid = args.require_str("plugin_guid")
    # Accepted for the schema; the skeleton does not reference it.
    args.require_str("target_assembly")
    return CallToolResult.from_text(render_plugin(name, guid, args.optional_list("hooks")))
