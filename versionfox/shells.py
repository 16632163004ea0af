"""Shell integrations: activation hooks and environment export scripts."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from .shell_escape import bash_escape, fish_escape, powershell_escape

_BASH_HOOK = """
{{.EnvContent}}

export __VFOX_PID=$$

_vfox_hook() {
    local last_status=$?
    trap -- '' SIGINT
    eval "$("{{.SelfPath}}" env -s bash)"
    trap - SIGINT
    return "$last_status"
}

if [[ ! "${PROMPT_COMMAND[*]:-}" =~ _vfox_hook ]]; then
    if [[ "$(declare -p PROMPT_COMMAND 2>/dev/null)" == "declare -a"* ]]; then
        PROMPT_COMMAND=( _vfox_hook "${PROMPT_COMMAND[@]}" )
    else
        PROMPT_COMMAND="_vfox_hook${PROMPT_COMMAND:+;${PROMPT_COMMAND}}"
    fi
fi

trap "vfox env --cleanup" EXIT
"""

_ZSH_HOOK = """
if [[ -z "$__VFOX_PID" ]]; then
    {{.EnvContent}}

    export __VFOX_PID=$$

    _vfox_hook() {
        trap -- '' SIGINT
        eval "$("{{.SelfPath}}" env -s zsh)"
        trap - SIGINT
    }

    typeset -ag precmd_functions chpwd_functions
    (( ${precmd_functions[(I)_vfox_hook]} )) || precmd_functions=( _vfox_hook $precmd_functions )
    (( ${chpwd_functions[(I)_vfox_hook]} )) || chpwd_functions=( _vfox_hook $chpwd_functions )

    trap "vfox env --cleanup" EXIT
fi
"""

_FISH_HOOK = """
{{.EnvContent}}

set __VFOX_PID %self

function __vfox_export_eval --on-event fish_prompt
    "{{.SelfPath}}" env -s fish | source

    if test "$vfox_fish_mode" != "disable_arrow"
        function __vfox_cd_hook --on-variable PWD
            if test "$vfox_fish_mode" = "eval_after_arrow"
                set -g __vfox_export_again 0
            else
                "{{.SelfPath}}" env -s fish | source
            end
        end
    end
end

function __vfox_export_eval_2 --on-event fish_preexec
    if set -q __vfox_export_again
        set -e __vfox_export_again
        "{{.SelfPath}}" env -s fish | source
        echo
    end
    functions --erase __vfox_cd_hook
end

function cleanup_on_exit --on-process-exit %self
    "{{.SelfPath}}" env --cleanup
end
"""

_PWSH_HOOK = """
{{.EnvContent}}

# Clean up once at startup: the exit event is not always delivered.
& '{{.SelfPath}}' env --cleanup 2>$null | Out-Null

$__VFOX_PID = $pid
$originalPrompt = $function:prompt
$OutputEncoding = [console]::InputEncoding = [console]::OutputEncoding = [Text.UTF8Encoding]::UTF8

function prompt {
    $export = & "{{.SelfPath}}" env -s pwsh
    if ($export) { Invoke-Expression -Command $export }
    & $originalPrompt
}

# Closing the window directly skips this handler.
Register-EngineEvent -SourceIdentifier PowerShell.Exiting -SupportEvent -Action {
    & "{{.SelfPath}}" env --cleanup
}
"""

_CLINK_HOOK = """
{{.EnvContent}}
"{{.SelfPath}}" env --cleanup >nul 2>nul
"""

_QUOTED = re.compile(r"'.*'")


class Shell(ABC):
    """A shell that can be hooked and fed environment changes."""

    hook: str = ""

    def activate(self) -> str:
        """The hook script template installed into the shell's startup."""
        return self.hook

    def export(self, envs: Mapping[str, Optional[str]]) -> str:
        """Script that sets each variable, or unsets it where the value is None."""
        return "".join(
            self._unset(key) if value is None else self._set(key, value)
            for key, value in envs.items()
        )

    @abstractmethod
    def _set(self, key: str, value: str) -> str:
        """Statement that sets one variable."""

    @abstractmethod
    def _unset(self, key: str) -> str:
        """Statement that removes one variable."""


class BashShell(Shell):
    """Bash."""

    hook = _BASH_HOOK

    def _set(self, key: str, value: str) -> str:
        return f"export {bash_escape(key)}={bash_escape(value)};"

    def _unset(self, key: str) -> str:
        return f"unset {bash_escape(key)};"


class ZshShell(BashShell):
    """Zsh; uses the same quoting and statements as bash."""

    hook = _ZSH_HOOK


class FishShell(Shell):
    """The fish shell."""

    hook = _FISH_HOOK

    def _set(self, key: str, value: str) -> str:
        if key == "PATH":
            parts = " ".join(fish_escape(path) for path in value.split(":"))
            return f"set -x -g PATH {parts};"
        return f"set -x -g {fish_escape(key)} {fish_escape(value)};"

    def _unset(self, key: str) -> str:
        return f"set -e -g {fish_escape(key)};"


class PowerShell(Shell):
    """PowerShell (pwsh)."""

    hook = _PWSH_HOOK

    def _set(self, key: str, value: str) -> str:
        escaped = powershell_escape(value)
        if not _QUOTED.search(escaped):
            escaped = f"'{escaped}'"
        return f"$env:{powershell_escape(key)}={escaped};"

    def _unset(self, key: str) -> str:
        return f"Remove-Item -Path 'env:/{powershell_escape(key)}';"


class ClinkShell(Shell):
    """cmd.exe with clink."""

    hook = _CLINK_HOOK

    def _set(self, key: str, value: str) -> str:
        return f'set "{key}={value}"\n'

    def _unset(self, key: str) -> str:
        return self._set(key, "")


_SHELLS: dict[str, type[Shell]] = {
    "bash": BashShell,
    "zsh": ZshShell,
    "pwsh": PowerShell,
    "fish": FishShell,
    "clink": ClinkShell,
}


def new_shell(name: str) -> Shell | None:
    """Shell for the given name (case-insensitive), or None if unsupported."""
    cls = _SHELLS.get(name.lower())
    return cls() if cls is not None else None