"""Unit tests for the runtime report."""

from scriptrun.config import ScriptrunConfig
from scriptrun.diagnostics import build_report, format_line, format_report
from scriptrun.runtime import ResolutionResult, RuntimeFamily


class TestFormatLine:
    """Test rendering of a single family."""

    def test_plain(self):
        result = ResolutionResult(
            family=RuntimeFamily.TYPED_SCRIPT,
            available=("deno", "nix-shell"),
            unavailable=("bun", "tsx", "ts-node"),
        )

        assert format_line(result, color=False) == "typed-script: deno nix-shell ~bun tsx ts-node~"

    def test_color_strikes_missing_runtimes(self):
        result = ResolutionResult(
            family=RuntimeFamily.SCRIPT,
            available=("node",),
            unavailable=("bun", "deno", "nix-shell"),
        )

        line = format_line(result, color=True)

        assert line == "script: node \x1b[2;9mbun deno nix-shell\x1b[0m"

    def test_everything_installed(self):
        result = ResolutionResult(
            family=RuntimeFamily.BINARY_MODULE,
            available=("wasmer", "wasmtime", "nix-shell"),
        )

        assert format_line(result, color=True) == "binary-module: wasmer wasmtime nix-shell"

    def test_nothing_installed(self):
        result = ResolutionResult(
            family=RuntimeFamily.BINARY_MODULE,
            unavailable=("wasmer", "wasmtime", "nix-shell"),
        )

        assert format_line(result, color=False) == "binary-module: (none) ~wasmer wasmtime nix-shell~"


class TestBuildReport:
    """Test which families end up in the report."""

    def test_default_families(self, make_probe):
        probe = make_probe({"node", "deno"})

        results = build_report(ScriptrunConfig(), probe=probe)

        assert [r.family for r in results] == [RuntimeFamily.SCRIPT, RuntimeFamily.TYPED_SCRIPT]
        assert format_report(results, color=False) == [
            "script: node deno ~bun nix-shell~",
            "typed-script: deno ~bun tsx ts-node nix-shell~",
        ]

    def test_binary_module_not_in_default_report(self, make_probe):
        probe = make_probe()
        build_report(ScriptrunConfig(), probe=probe)

        assert "wasmer" not in probe.calls

    def test_configured_families(self, make_probe):
        config = ScriptrunConfig(report_families=[RuntimeFamily.BINARY_MODULE])

        results = build_report(config, probe=make_probe({"wasmtime"}))

        assert len(results) == 1
        assert results[0].available == ("wasmtime",)

    def test_explicit_families_override_config(self, make_probe):
        results = build_report(ScriptrunConfig(), families=list(RuntimeFamily), probe=make_probe())

        assert {r.family for r in results} == set(RuntimeFamily)
