from chatfmt.services.markdown_service import format_message
from chatfmt.services.smoke_check import SAMPLE_MESSAGE, run_smoke_check


def test_sample_message_passes():
    html = format_message(SAMPLE_MESSAGE)
    report = run_smoke_check(html)
    assert report.ok
    assert [r.name for r in report.results] == [
        "headings_converted",
        "heading_tags_present",
    ]
    # Lists from the sample are wrapped too
    assert "<ul>" in html and "<ol>" in html


def test_raw_markers_fail_check():
    report = run_smoke_check("## still markdown")
    assert not report.ok
    failed = [r for r in report.results if not r.passed]
    assert {r.name for r in failed} == {"headings_converted", "heading_tags_present"}
    assert "'## '" in failed[0].message


def test_missing_h2_fails_check():
    report = run_smoke_check("<h1>only one</h1>")
    assert not report.ok
    assert report.results[0].passed
    assert not report.results[1].passed
