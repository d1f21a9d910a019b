"""Tests for svgenius.batch module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svgenius.batch import (
    BatchFailure,
    BatchOptions,
    BatchReport,
    SourceDocument,
    format_batch_report,
    parse_batch_config_file,
    run_batch,
    source_name,
)
from svgenius.convert import convert_svg
from svgenius.errors import (
    ComponentNameError,
    DuplicateComponentError,
    EmptyBatchError,
    EmptyInputError,
    SvgParseError,
)


VALID_SVG = '<svg viewBox="0 0 24 24"><path d="M0 0h24" stroke-width="2"/></svg>'


def make_sources() -> list[SourceDocument]:
    return [
        SourceDocument(id="a.svg", text=VALID_SVG),
        SourceDocument(id="b.svg", text="   "),
        SourceDocument(id="c.svg", text=VALID_SVG),
    ]


class TestBatchOptions:
    """Tests for BatchOptions dataclass."""

    def test_defaults(self):
        options = BatchOptions()
        assert options.language_mode == "typed"
        assert options.output_directory is None
        assert options.emit_manifest is False
        assert options.max_workers == 1

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            BatchOptions(language_mode="ts")

    def test_invalid_workers(self):
        with pytest.raises(ValueError, match="max_workers"):
            BatchOptions(max_workers=0)


class TestSourceName:
    """Tests for source_name function."""

    def test_from_id(self):
        assert source_name(SourceDocument(id="arrow-left.svg", text="")) == "ArrowLeft"

    def test_uppercase_suffix(self):
        assert source_name(SourceDocument(id="LOGO.SVG", text="")) == "LOGO"

    def test_override(self):
        source = SourceDocument(id="a.svg", text="", name="close button")
        assert source_name(source) == "CloseButton"


class TestRunBatch:
    """Tests for run_batch function."""

    def test_all_succeed(self):
        sources = [
            SourceDocument(id="home.svg", text=VALID_SVG),
            SourceDocument(id="settings.svg", text=VALID_SVG),
        ]
        report = run_batch(sources, BatchOptions())

        assert report.component_names == ["Home", "Settings"]
        assert report.failures == []
        assert not report.has_errors
        assert report.manifest_text is None

    def test_matches_single_conversion(self):
        report = run_batch([SourceDocument(id="home.svg", text=VALID_SVG)], BatchOptions())
        assert report.results[0].code == convert_svg(VALID_SVG, "home").code

    def test_collects_failures_in_order(self):
        report = run_batch(make_sources(), BatchOptions(emit_manifest=True))

        assert report.component_names == ["A", "C"]
        assert [f.source_id for f in report.failures] == ["b.svg"]
        assert isinstance(report.failures[0].error, EmptyInputError)
        assert report.has_errors
        assert report.manifest_text == 'export * from "./A";\nexport * from "./C";\n'

    def test_repeated_runs_identical(self):
        first = run_batch(make_sources(), BatchOptions(emit_manifest=True))
        second = run_batch(make_sources(), BatchOptions(emit_manifest=True))

        assert [r.code for r in first.results] == [r.code for r in second.results]
        assert first.manifest_text == second.manifest_text
        assert [f.source_id for f in first.failures] == [f.source_id for f in second.failures]

    def test_thread_pool_keeps_order(self):
        sources = [SourceDocument(id=f"icon-{i}.svg", text=VALID_SVG) for i in range(20)]
        sequential = run_batch(sources, BatchOptions(emit_manifest=True))
        parallel = run_batch(sources, BatchOptions(emit_manifest=True, max_workers=4))

        assert parallel.component_names == [f"Icon{i}" for i in range(20)]
        assert parallel.manifest_text == sequential.manifest_text
        assert [r.code for r in parallel.results] == [r.code for r in sequential.results]

    def test_untyped_mode(self):
        report = run_batch(
            [SourceDocument(id="home.svg", text=VALID_SVG)],
            BatchOptions(language_mode="untyped"),
        )
        assert "export const Home = (props) => (" in report.results[0].code

    def test_parse_and_name_failures(self):
        sources = [
            SourceDocument(id="broken.svg", text="<svg><g></svg>"),
            SourceDocument(id="___.svg", text=VALID_SVG),
        ]
        report = run_batch(sources, BatchOptions())

        assert report.results == []
        assert isinstance(report.failures[0].error, SvgParseError)
        assert isinstance(report.failures[1].error, ComponentNameError)

    def test_too_deep_item_collected(self):
        depth = 5000
        deep = "<svg>" + "<g>" * depth + "</g>" * depth + "</svg>"
        sources = [
            SourceDocument(id="a.svg", text="<svg/>"),
            SourceDocument(id="deep.svg", text=deep),
        ]
        report = run_batch(sources, BatchOptions(emit_manifest=True))

        assert report.component_names == ["A"]
        assert report.failures[0].source_id == "deep.svg"
        assert isinstance(report.failures[0].error, SvgParseError)
        assert "nesting too deep" in str(report.failures[0].error)
        assert report.manifest_text == 'export * from "./A";\n'

    def test_moderately_deep_item_converts(self):
        depth = 300
        nested = "<svg>" + '<g class="c">' * depth + "</g>" * depth + "</svg>"
        report = run_batch([SourceDocument(id="nested.svg", text=nested)], BatchOptions())

        assert report.failures == []
        assert report.results[0].code.count('className="c"') == depth

    def test_duplicate_names(self):
        sources = [
            SourceDocument(id="my-icon.svg", text=VALID_SVG),
            SourceDocument(id="my_icon.svg", text=VALID_SVG),
        ]
        report = run_batch(sources, BatchOptions(emit_manifest=True))

        assert report.component_names == ["MyIcon"]
        assert report.failures[0].source_id == "my_icon.svg"
        assert isinstance(report.failures[0].error, DuplicateComponentError)
        assert "my-icon.svg" in str(report.failures[0].error)
        assert report.manifest_text == 'export * from "./MyIcon";\n'

    def test_all_fail_manifest_empty(self):
        report = run_batch([SourceDocument(id="x.svg", text="")], BatchOptions(emit_manifest=True))
        assert report.results == []
        assert report.manifest_text == ""

    def test_empty_batch(self):
        with pytest.raises(EmptyBatchError):
            run_batch([], BatchOptions())


class TestParseBatchConfigFile:
    """Tests for parse_batch_config_file function."""

    @pytest.fixture
    def full_config_file(self, tmp_path) -> Path:
        """Create a config file with every key."""
        content = """
typescript: false
output: build/icons
barrel: true
workers: 4
"""
        config_file = tmp_path / "svgenius.yaml"
        config_file.write_text(content)
        return config_file

    def test_parse_full_config(self, full_config_file):
        options = parse_batch_config_file(full_config_file)

        assert options.language_mode == "untyped"
        assert options.output_directory == Path("build/icons")
        assert options.emit_manifest is True
        assert options.max_workers == 4

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert parse_batch_config_file(config_file) == BatchOptions()

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_batch_config_file(Path("/nonexistent/svgenius.yaml"))

    def test_not_a_dictionary(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- typescript\n")
        with pytest.raises(ValueError, match="YAML dictionary"):
            parse_batch_config_file(config_file)

    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "unknown.yaml"
        config_file.write_text("typescrpt: true\n")
        with pytest.raises(ValueError, match="Unknown config keys: typescrpt"):
            parse_batch_config_file(config_file)

    def test_bad_bool(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("barrel: sometimes\n")
        with pytest.raises(ValueError, match="'barrel' must be true or false"):
            parse_batch_config_file(config_file)

    def test_bad_workers(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("workers: many\n")
        with pytest.raises(ValueError, match="'workers' must be an integer"):
            parse_batch_config_file(config_file)


class TestFormatBatchReport:
    """Tests for format_batch_report function."""

    def test_report_text(self):
        report = run_batch(make_sources(), BatchOptions(emit_manifest=True))
        text = format_batch_report(report)

        assert "Converted: 2" in text
        assert "Failed: 1" in text
        assert "[OK] A" in text
        assert "[ERROR] b.svg: Empty SVG content provided" in text
        assert "Manifest entries: 2" in text

    def test_warnings_listed(self):
        source = SourceDocument(id="x.svg", text='<svg class="a" className="b"/>')
        text = format_batch_report(run_batch([source], BatchOptions()))
        assert "[WARNING] <svg>: attribute 'className'" in text

    def test_empty_report(self):
        text = format_batch_report(BatchReport())
        assert "Converted: 0" in text
        assert "Manifest" not in text

    def test_failure_message(self):
        failure = BatchFailure(source_id="a.svg", error=EmptyInputError("blank"))
        assert failure.message == "a.svg: blank"
