"""The 'basic' template: a minimal Effect-TS library.

Produces the package manifest, strict dev and build tsconfigs, a
source stub and a matching test stub, a vitest config, a README, and
ignore/editor files. The source and test stubs are both built from the
same per-level section table, so the test imports always match what
the source exports.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from create_effect_agent.models.config import (
    EffectivenessLevel,
    PlatformPack,
    ResolvedConfig,
)
from create_effect_agent.scaffold.package_managers import commands_for
from create_effect_agent.scaffold.templates.stubs import StubPair
from create_effect_agent.templating import render_template

SOURCE_PATH = "src/index.ts"
TEST_PATH = "test/index.test.ts"
SOURCE_SPECIFIER = "../src/index"

BASIC_SUMMARY = "A minimal Effect-TS library"

MANIFEST_SCRIPTS: dict[str, str] = {
    "build": "tsc -p tsconfig.build.json",
    "typecheck": "tsc --noEmit",
    "test": "vitest run",
    "format": "prettier --check .",
}


@dataclass(frozen=True)
class StubSection:
    """One exported symbol of the source stub and the tests that cover it.

    Attributes:
        symbol: Name the source exports and the test imports.
        source: Template text declaring ``export ... symbol``.
        test: Template text of the vitest cases exercising the symbol.
        imports: Extra Effect modules the source needs for this section.
    """

    symbol: str
    source: str
    test: str = ""
    imports: tuple[str, ...] = ()


_GREET = StubSection(
    symbol="greet",
    source="""/**
 * Example Effect function
 */
export const greet = (name: string): Effect.Effect<string> =>
  Effect.sync(() => `Hello, ${name}! Welcome to {{projectName}}.`)
""",
    test="""  it('greets by name', () => {
    const result = Effect.runSync(greet('World'))
    expect(result).toBe('Hello, World! Welcome to {{projectName}}.')
  })
""",
)

_MAIN_BASIC = StubSection(
    symbol="main",
    source="""/**
 * Example program using the greet function
 */
export const main: Effect.Effect<void> = Effect.gen(function* () {
  const message = yield* greet('{{projectName}}')
  yield* Effect.log(message)
})
""",
    test="""  it('runs the example program', () => {
    expect(() => Effect.runSync(main)).not.toThrow()
  })
""",
)

_CONFIG_SERVICE = StubSection(
    symbol="ConfigService",
    source="""/**
 * Example Effect.Service holding application configuration
 */
export class ConfigService extends Effect.Service<ConfigService>()('ConfigService', {
  succeed: {
    appName: '{{projectName}}'
  }
}) {}
""",
    test="""  it('provides the configured app name', () => {
    const program = Effect.gen(function* () {
      const config = yield* ConfigService
      return config.appName
    })
    expect(Effect.runSync(Effect.provide(program, ConfigLive))).toBe('{{projectName}}')
  })
""",
)

_CONFIG_LIVE = StubSection(
    symbol="ConfigLive",
    source="""/**
 * Layer providing the ConfigService
 */
export const ConfigLive = ConfigService.Default
""",
)

_MAIN_INTERMEDIATE = StubSection(
    symbol="main",
    source="""/**
 * Example program using the greet function and the ConfigService
 */
export const main: Effect.Effect<void, never, ConfigService> = Effect.gen(function* () {
  const config = yield* ConfigService
  const message = yield* greet(config.appName)
  yield* Effect.log(message)
})
""",
    test="""  it('runs the example program with the service layer', () => {
    expect(() => Effect.runSync(Effect.provide(main, ConfigLive))).not.toThrow()
  })
""",
)

_VALIDATION_ERROR = StubSection(
    symbol="ValidationError",
    imports=("Data",),
    source="""/**
 * Error taxonomy for {{projectName}}
 */
export class ValidationError extends Data.TaggedError('ValidationError')<{
  readonly field: string
  readonly reason: string
}> {}
""",
    test="""  it('fails validation for non-string input', () => {
    const program = Effect.gen(function* () {
      const service = yield* DataService
      return yield* service.validate(123)
    })
    const error = Effect.runSync(Effect.flip(Effect.provide(program, DataLive)))
    expect(error).toBeInstanceOf(ValidationError)
    expect(error._tag).toBe('ValidationError')
  })
""",
)

_DATA_SERVICE = StubSection(
    symbol="DataService",
    source="""/**
 * Example Effect.Service with two operations; validate can fail
 */
export class DataService extends Effect.Service<DataService>()('DataService', {
  succeed: {
    validate: (data: unknown): Effect.Effect<string, ValidationError> =>
      typeof data === 'string'
        ? Effect.succeed(data)
        : Effect.fail(new ValidationError({ field: 'input', reason: 'Must be a string' })),
    process: (data: string): Effect.Effect<string> => Effect.succeed(data.toUpperCase())
  }
}) {}
""",
    test="""  it('validates then processes input', () => {
    const program = Effect.gen(function* () {
      const service = yield* DataService
      return yield* service.validate('hello').pipe(Effect.flatMap(service.process))
    })
    expect(Effect.runSync(Effect.provide(program, DataLive))).toBe('HELLO')
  })
""",
)

_DATA_LIVE = StubSection(
    symbol="DataLive",
    source="""/**
 * Layer providing the DataService
 */
export const DataLive = DataService.Default
""",
)

_MAIN_SENIOR = StubSection(
    symbol="main",
    source="""/**
 * Example program composing validate and process
 */
export const main: Effect.Effect<void, ValidationError, DataService> = Effect.gen(function* () {
  const service = yield* DataService
  const result = yield* service.validate('hello').pipe(Effect.flatMap(service.process))
  yield* Effect.log(`Processed: ${result}`)
})
""",
    test="""  it('runs the example program with the service layer', () => {
    expect(() => Effect.runSync(Effect.provide(main, DataLive))).not.toThrow()
  })
""",
)

_BASIC_SECTIONS = (_GREET, _MAIN_BASIC)

STUB_SECTIONS: dict[EffectivenessLevel, tuple[StubSection, ...]] = {
    EffectivenessLevel.none: _BASIC_SECTIONS,
    EffectivenessLevel.junior: _BASIC_SECTIONS,
    EffectivenessLevel.intermediate: (_GREET, _CONFIG_SERVICE, _CONFIG_LIVE, _MAIN_INTERMEDIATE),
    EffectivenessLevel.senior: (_GREET, _VALIDATION_ERROR, _DATA_SERVICE, _DATA_LIVE, _MAIN_SENIOR),
}


def exported_symbols(level: EffectivenessLevel) -> list[str]:
    """Symbols the source stub exports at this level, in declaration order."""
    return [section.symbol for section in STUB_SECTIONS[level]]


def project_description(config: ResolvedConfig, summary: str) -> str:
    """Manifest and README description; mentions agent tooling when rules were chosen."""
    if config.rule_formats:
        return f"{summary} with agentic development support"
    return summary


def index_stub_pair(config: ResolvedConfig) -> StubPair:
    """The src/index.ts and test/index.test.ts pair for the chosen level."""
    return StubPair(
        source_path=SOURCE_PATH,
        test_path=TEST_PATH,
        import_specifier=SOURCE_SPECIFIER,
        symbols=tuple(exported_symbols(config.effectiveness_level)),
    )


def render_source_stub(config: ResolvedConfig, reexports: tuple[str, ...] = ()) -> str:
    sections = STUB_SECTIONS[config.effectiveness_level]
    modules = ["Effect"]
    for section in sections:
        for module in section.imports:
            if module not in modules:
                modules.append(module)

    header = "".join(f"import * as {module} from 'effect/{module}'\n" for module in modules)
    header += "".join(f"export * from '{specifier}'\n" for specifier in reexports)
    body = "\n".join(section.source for section in sections)
    return render_template(f"{header}\n{body}", {"projectName": config.project_name})


def render_test_stub(config: ResolvedConfig) -> str:
    sections = STUB_SECTIONS[config.effectiveness_level]
    symbols = ", ".join(exported_symbols(config.effectiveness_level))
    cases = "\n".join(section.test for section in sections if section.test)
    template = (
        "import { describe, expect, it } from 'vitest'\n"
        "import * as Effect from 'effect/Effect'\n"
        f"import {{ {symbols} }} from '{SOURCE_SPECIFIER}'\n"
        "\n"
        "describe('{{projectName}}', () => {\n"
        f"{cases}"
        "})\n"
    )
    return render_template(template, {"projectName": config.project_name})


def build_package_json(
    config: ResolvedConfig,
    summary: str = BASIC_SUMMARY,
    extra_dependencies: dict[str, str] | None = None,
    extra_keywords: tuple[str, ...] = (),
) -> dict[str, Any]:
    dev_dependencies: dict[str, str] = {
        "@types/node": "^20.0.0",
        "prettier": "^3.0.0",
        "typescript": "^5.9.0",
        "vitest": "^1.0.0",
    }
    if config.platform_pack is PlatformPack.frontend:
        dev_dependencies["@types/react"] = "^18.0.0"

    dependencies = {"effect": "^3.18.0", **(extra_dependencies or {})}
    return {
        "name": config.project_name,
        "version": "0.0.1",
        "description": project_description(config, summary),
        "type": "module",
        "main": "dist/index.js",
        "types": "dist/index.d.ts",
        "exports": {
            ".": {
                "types": "./dist/index.d.ts",
                "import": "./dist/index.js",
            },
        },
        "scripts": dict(MANIFEST_SCRIPTS),
        "files": ["dist"],
        "engines": {"node": ">=18.18"},
        "keywords": ["effect", "typescript", "functional-programming", *extra_keywords],
        "author": "",
        "license": "MIT",
        "dependencies": dict(sorted(dependencies.items())),
        "devDependencies": dict(sorted(dev_dependencies.items())),
    }


def type_libraries(pack: PlatformPack) -> list[str] | None:
    """tsconfig 'lib' entries for a platform pack; None means compiler default."""
    if pack is PlatformPack.frontend:
        return ["ES2022", "DOM", "DOM.Iterable"]
    if pack is PlatformPack.backend:
        return ["ES2022"]
    return None


def build_tsconfig(config: ResolvedConfig) -> dict[str, Any]:
    compiler_options: dict[str, Any] = {
        "target": "ES2022",
        "module": "ESNext",
        "moduleResolution": "bundler",
        "declaration": False,
        "outDir": "./dist",
        "removeComments": True,
        "strict": True,
        "noImplicitReturns": True,
        "noImplicitOverride": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "exactOptionalPropertyTypes": True,
        "noImplicitAny": True,
        "noImplicitThis": True,
        "alwaysStrict": True,
        "skipLibCheck": True,
        "esModuleInterop": True,
        "allowSyntheticDefaultImports": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "verbatimModuleSyntax": True,
        "types": ["vitest/globals"],
    }
    lib = type_libraries(config.platform_pack)
    if lib is not None:
        compiler_options["lib"] = lib
    return {
        "compilerOptions": compiler_options,
        "include": ["src/**/*", "test/**/*"],
        "exclude": ["node_modules", "dist"],
    }


def build_tsconfig_build() -> dict[str, Any]:
    return {
        "extends": "./tsconfig.json",
        "compilerOptions": {
            "declaration": True,
            "declarationMap": True,
            "outDir": "./dist",
            "removeComments": False,
            "sourceMap": True,
            "inlineSources": True,
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist", "test/**/*"],
    }


def to_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


VITEST_CONFIG = """/// <reference types="vitest" />
import { defineConfig } from 'vitest/config'

export default defineConfig({
  test: {
    environment: 'node',
    globals: true
  }
})
"""

GITIGNORE = """node_modules/
dist/
*.log
.DS_Store
.env
.env.local
coverage/
.idea/
"""

EDITORCONFIG = """root = true

[*]
charset = utf-8
end_of_line = lf
indent_style = space
indent_size = 2
insert_final_newline = true
trim_trailing_whitespace = true

[*.md]
trim_trailing_whitespace = false
"""

README_TEMPLATE = """# {{projectName}}

{{description}}.

## Installation

```bash
{{install}}
```

## Usage

```typescript
import * as Effect from 'effect/Effect'
import { greet } from '{{projectName}}'

const result = Effect.runSync(greet('World'))
console.log(result) // "Hello, World! Welcome to {{projectName}}."
```

## Development

```bash
# Install dependencies
{{install}}

# Run tests
{{testCommand}}

# Build the library
{{buildCommand}}

# Type check
{{typecheckCommand}}

# Format code
{{formatCommand}}
```
"""

_FRONTEND_README = """
## Front-end Usage

This library is configured for front-end TypeScript development with DOM
type libraries. For JSX support, add `"jsx": "react-jsx"` to the
`compilerOptions` in `tsconfig.json`.
"""

_BACKEND_README = """
## Back-end Usage

This library targets server runtimes: `tsconfig.json` restricts the type
libraries to ES2022, so DOM globals are not available.
"""

_LEVEL_README: dict[EffectivenessLevel, str] = {
    EffectivenessLevel.junior: "basic effect construction and chaining",
    EffectivenessLevel.intermediate: "Effect.Service and Layer based dependency injection",
    EffectivenessLevel.senior: "error taxonomy with tagged errors and service composition",
}


def render_readme(config: ResolvedConfig, summary: str = BASIC_SUMMARY, extra: str = "") -> str:
    cmds = commands_for(config.package_manager)
    content = render_template(
        README_TEMPLATE,
        {
            "projectName": config.project_name,
            "description": project_description(config, summary),
            "install": cmds.install,
            "testCommand": cmds.script("test"),
            "buildCommand": cmds.script("build"),
            "typecheckCommand": cmds.script("typecheck"),
            "formatCommand": cmds.script("format"),
        },
    )

    if config.platform_pack is PlatformPack.frontend:
        content += _FRONTEND_README
    elif config.platform_pack is PlatformPack.backend:
        content += _BACKEND_README
    content += extra

    level = config.effectiveness_level
    if level is not EffectivenessLevel.none:
        content += (
            "\n## Effect Patterns\n\n"
            f"This library demonstrates {level.value} level Effect patterns: "
            f"{_LEVEL_README[level]}. Exported examples: "
            + ", ".join(f"`{symbol}`" for symbol in exported_symbols(level))
            + ".\n"
        )

    if config.rule_formats:
        content += (
            "\n## Agentic Development\n\n"
            "This project includes configuration for the following development tools:\n\n"
            + "".join(f"- **{fmt.value}**\n" for fmt in config.rule_formats)
        )

    return content


def render_basic_template(config: ResolvedConfig) -> dict[str, str]:
    """Render every base file of the basic template, keyed by relative path."""
    return {
        "package.json": to_json(build_package_json(config)),
        "tsconfig.json": to_json(build_tsconfig(config)),
        "tsconfig.build.json": to_json(build_tsconfig_build()),
        SOURCE_PATH: render_source_stub(config),
        TEST_PATH: render_test_stub(config),
        "vitest.config.ts": VITEST_CONFIG,
        "README.md": render_readme(config),
        ".gitignore": GITIGNORE,
        ".editorconfig": EDITORCONFIG,
    }


def basic_stub_pairs(config: ResolvedConfig) -> tuple[StubPair, ...]:
    return (index_stub_pair(config),)
