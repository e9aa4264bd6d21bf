"""How each supported package manager installs and runs scripts."""

from __future__ import annotations

from dataclasses import dataclass

from create_effect_agent.models.config import PackageManager


@dataclass(frozen=True)
class ManagerCommands:
    """Shell prefixes a package manager uses for common tasks."""

    install: str
    run: str

    def script(self, name: str) -> str:
        """Command line that runs a package.json script."""
        return f"{self.run} {name}"


MANAGER_COMMANDS: dict[PackageManager, ManagerCommands] = {
    PackageManager.npm: ManagerCommands(install="npm install", run="npm run"),
    PackageManager.pnpm: ManagerCommands(install="pnpm install", run="pnpm"),
    PackageManager.bun: ManagerCommands(install="bun install", run="bun run"),
}


def commands_for(manager: PackageManager) -> ManagerCommands:
    return MANAGER_COMMANDS[manager]
