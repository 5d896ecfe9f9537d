"""Tests for the Rich result renderers."""

from white_label.output.renderers import render_quiet, render_result
from white_label.services.result import ServiceError, ServiceResult


class TestRenderResult:
    def test_parse_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="parse",
            data={
                "count": 2,
                "has_wildcard": True,
                "clauses": [
                    {"pattern": '"A"', "kind": "integer", "raw": "8080", "value": 8080,
                     "line": 1, "column": 1},
                    {"pattern": "_", "kind": "boolean", "raw": "false", "value": False,
                     "line": 2, "column": 1},
                ],
            },
        )
        output = render_result(result)
        assert "Pattern" in output
        assert '"A"' in output
        assert "8080" in output
        assert "boolean" in output

    def test_generate(self) -> None:
        result = ServiceResult(
            ok=True,
            op="generate",
            data={
                "brand": "Contoso",
                "format": "python",
                "path": "/build/brand.py",
                "count": 1,
                "constants": {"PORT": "9090"},
            },
        )
        output = render_result(result, verbose=True)
        assert "path: /build/brand.py" in output
        assert "PORT: 9090" in output

    def test_splice_text_passes_through_verbatim(self) -> None:
        text = "\tPORT = 1  # [bold]not markup[/bold] :smile:\n"
        result = ServiceResult(ok=True, op="splice", data={"text": text, "count": 1})
        assert render_result(result) == text

    def test_error_with_diagnostic(self) -> None:
        result = ServiceResult(
            ok=False,
            op="resolve",
            error=ServiceError(
                code="SYNTAX_ERROR",
                message="expected `=>` after pattern, found `1` (line 1, column 5)",
                detail={"line": 1, "column": 5, "diagnostic": '1 | "A" 1\n        ^ expected `=>`'},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR  resolve — expected `=>`")
        assert '1 | "A" 1' in output

    def test_error_lists_failed_constants(self) -> None:
        result = ServiceResult(
            ok=False,
            op="generate",
            error=ServiceError(
                code="NO_MATCH",
                message="2 constants failed",
                detail={
                    "errors": [
                        {"constant": "PORT", "code": "NO_MATCH", "message": "no PORT"},
                        {"constant": "HOST", "code": "NO_MATCH", "message": "no HOST"},
                    ]
                },
            ),
        )
        output = render_result(result)
        assert "PORT: no PORT" in output
        assert "HOST: no HOST" in output


class TestRenderQuiet:
    def test_generate_prints_path(self) -> None:
        result = ServiceResult(ok=True, op="generate", data={"path": "/build/brand.py"})
        assert render_quiet(result) == "/build/brand.py"

    def test_other_ops(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 0, "constants": []})
        assert render_quiet(result) == "OK: check"
