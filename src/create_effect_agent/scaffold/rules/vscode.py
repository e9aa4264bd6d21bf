"""VS Code workspace settings: .vscode/settings.json."""

from __future__ import annotations

import json

from create_effect_agent.models.config import ResolvedConfig

VSCODE_SETTINGS_PATH = ".vscode/settings.json"


def render_vscode_settings(config: ResolvedConfig) -> dict[str, str]:
    settings = {
        "typescript.preferences.strict": True,
        "typescript.suggest.autoImports": True,
        "typescript.format.enable": True,
        "typescript.tsdk": "node_modules/typescript/lib",
        "editor.formatOnSave": True,
        "editor.defaultFormatter": "esbenp.prettier-vscode",
        "editor.codeActionsOnSave": {
            "source.fixAll.eslint": "explicit",
            "source.organizeImports": "explicit",
        },
        "typescript.preferences.includePackageJsonAutoImports": "auto",
        "files.exclude": {
            "dist/": True,
            "node_modules/": True,
            "*.log": True,
        },
    }
    return {VSCODE_SETTINGS_PATH: json.dumps(settings, indent=2) + "\n"}
