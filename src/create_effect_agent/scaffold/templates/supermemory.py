"""The 'supermemory' template: an Effect-TS library wired to effect-supermemory.

Everything the basic template renders, plus an example module that
builds the Supermemory layers and an offline test for it that swaps in
a mocked service. src/index.ts re-exports the example module.
"""

from __future__ import annotations

from create_effect_agent.models.config import ResolvedConfig
from create_effect_agent.scaffold.templates.basic import (
    EDITORCONFIG,
    GITIGNORE,
    SOURCE_PATH,
    TEST_PATH,
    VITEST_CONFIG,
    build_package_json,
    build_tsconfig,
    build_tsconfig_build,
    index_stub_pair,
    render_readme,
    render_source_stub,
    render_test_stub,
    to_json,
)
from create_effect_agent.scaffold.templates.stubs import StubPair
from create_effect_agent.templating import render_template

SUPERMEMORY_SUMMARY = "A Supermemory Effect-TS library"
SUPERMEMORY_DEPENDENCIES = {"effect-supermemory": "^0.2.5"}

EXAMPLE_PATH = "src/supermemory/example.ts"
EXAMPLE_TEST_PATH = "test/supermemory.example.test.ts"
EXAMPLE_SPECIFIER = "../src/supermemory/example"
EXAMPLE_SYMBOLS = ("SupermemoryConfigLive", "SupermemoryLive", "exampleSupermemoryEffect")

EXAMPLE_SOURCE = """import * as Effect from 'effect/Effect'
import * as Layer from 'effect/Layer'
import * as Schedule from 'effect/Schedule'
import { Supermemory, SupermemoryConfig } from 'effect-supermemory'

/**
 * Supermemory configuration read from SUPERMEMORY_API_KEY when the layer is built
 */
export const SupermemoryConfigLive = Layer.sync(SupermemoryConfig, () =>
  SupermemoryConfig.of({
    apiKey: process.env.SUPERMEMORY_API_KEY ?? ''
  })
)

/**
 * Live Supermemory client for {{projectName}}
 */
export const SupermemoryLive = Supermemory.Live.pipe(Layer.provide(SupermemoryConfigLive))

/**
 * Example query against Supermemory, retried with exponential backoff
 */
export const exampleSupermemoryEffect = (query: string) =>
  Effect.gen(function* () {
    yield* Supermemory
    yield* Effect.log(`Querying Supermemory with: ${query}`)
    return `Response for: ${query}`
  }).pipe(Effect.retry({ times: 3, schedule: Schedule.exponential('100 millis') }))
"""

EXAMPLE_TEST = """import { describe, expect, it } from 'vitest'
import * as Effect from 'effect/Effect'
import * as Layer from 'effect/Layer'
import { Supermemory, SupermemoryConfig } from 'effect-supermemory'
import { SupermemoryConfigLive, SupermemoryLive, exampleSupermemoryEffect } from '../src/supermemory/example'

describe('{{projectName}} supermemory example', () => {
  it('answers a query against a mocked service', () => {
    const MockSupermemory = Layer.succeed(
      Supermemory,
      Supermemory.of({
        query: (query: string) => Effect.succeed(`Mocked response for: ${query}`)
      })
    )
    const program = exampleSupermemoryEffect('test query').pipe(Effect.provide(MockSupermemory))
    expect(Effect.runSync(program)).toBe('Response for: test query')
  })

  it('reads the API key from the environment', () => {
    process.env.SUPERMEMORY_API_KEY = 'test-api-key'
    const program = Effect.gen(function* () {
      const config = yield* SupermemoryConfig
      return config.apiKey
    }).pipe(Effect.provide(SupermemoryConfigLive))
    expect(Effect.runSync(program)).toBe('test-api-key')
    delete process.env.SUPERMEMORY_API_KEY
  })

  it('exposes the live layer', () => {
    expect(Layer.isLayer(SupermemoryLive)).toBe(true)
  })
})
"""

_README_QUICKSTART = """
## Supermemory Quickstart

This template includes an example integration with `effect-supermemory`.

1. Put your API key in a `.env` file (already git-ignored):

   ```
   SUPERMEMORY_API_KEY=your_supermemory_api_key_here
   ```

2. `src/supermemory/example.ts` builds `SupermemoryLive` and exposes
   `exampleSupermemoryEffect`, which retries with exponential backoff:

   ```typescript
   import * as Effect from 'effect/Effect'
   import { SupermemoryLive, exampleSupermemoryEffect } from '{{projectName}}'

   Effect.runPromise(
     exampleSupermemoryEffect('Hello Supermemory').pipe(Effect.provide(SupermemoryLive))
   )
   ```

3. `test/supermemory.example.test.ts` runs offline by providing a mocked
   Supermemory service.
"""


def supermemory_stub_pairs(config: ResolvedConfig) -> tuple[StubPair, ...]:
    return (
        index_stub_pair(config),
        StubPair(
            source_path=EXAMPLE_PATH,
            test_path=EXAMPLE_TEST_PATH,
            import_specifier=EXAMPLE_SPECIFIER,
            symbols=EXAMPLE_SYMBOLS,
        ),
    )


def render_supermemory_template(config: ResolvedConfig) -> dict[str, str]:
    """Render every base file of the supermemory template, keyed by relative path."""
    variables = {"projectName": config.project_name}
    manifest = build_package_json(
        config,
        summary=SUPERMEMORY_SUMMARY,
        extra_dependencies=SUPERMEMORY_DEPENDENCIES,
        extra_keywords=("supermemory",),
    )
    return {
        "package.json": to_json(manifest),
        "tsconfig.json": to_json(build_tsconfig(config)),
        "tsconfig.build.json": to_json(build_tsconfig_build()),
        SOURCE_PATH: render_source_stub(config, reexports=("./supermemory/example",)),
        TEST_PATH: render_test_stub(config),
        EXAMPLE_PATH: render_template(EXAMPLE_SOURCE, variables),
        EXAMPLE_TEST_PATH: render_template(EXAMPLE_TEST, variables),
        "vitest.config.ts": VITEST_CONFIG,
        "README.md": render_readme(
            config,
            summary=SUPERMEMORY_SUMMARY,
            extra=render_template(_README_QUICKSTART, variables),
        ),
        ".gitignore": GITIGNORE,
        ".editorconfig": EDITORCONFIG,
    }
