"""
목적: 콘텐츠 추출기와 레지스트리 선택 규칙을 검증한다.
설명: 본문 텍스트 정제, 레이스 결과 표 문장화, URL 패턴 기반 선택과 폴백을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/f1_chat/core/ingestion/extractors/*.py
"""

from __future__ import annotations

from f1_chat.core.ingestion.extractors import (
    BodyTextExtractor,
    RaceResultsExtractor,
    create_default_registry,
)

_RESULTS_HTML = """
<html><body>
<table>
  <tr><th>Grand Prix</th><th>Date</th><th>Winner</th><th>Car</th><th>Laps</th><th>Time</th></tr>
  <tr>
    <td><span>Flag of </span>Bahrain Grand Prix Sakhir</td>
    <td>02 Mar 2024</td>
    <td><span class="hide-for-desktop">VER</span><span class="hide-for-mobile">Max Verstappen</span></td>
    <td><span class="hide-for-mobile">Red Bull Racing Honda RBPT</span></td>
    <td>57</td>
    <td>1:31:44.742</td>
  </tr>
  <tr><td>short</td><td>row</td></tr>
</table>
</body></html>
"""


def test_body_text_drops_scripts_and_collapses_whitespace() -> None:
    """본문 추출이 스크립트/스타일을 제거하고 공백을 접는지 검증한다."""

    html = """
    <html><head><style>p { color: red; }</style></head>
    <body>
      <script>var tracking = 1;</script>
      <h1>Lewis   Hamilton</h1>
      <p>won the
         race.</p>
    </body></html>
    """

    assert BodyTextExtractor().extract(html, "https://a.com/page1") == "Lewis Hamilton won the race."


def test_race_results_rows_become_sentences() -> None:
    """결과 표 행이 시즌을 포함한 문장으로 바뀌는지 검증한다."""

    extractor = RaceResultsExtractor()
    url = "https://www.formula1.com/en/results/2024/races"

    text = extractor.extract(_RESULTS_HTML, url)

    assert extractor.matches(url) is True
    assert text == (
        "In the 2024 F1 Season, at the Bahrain Grand Prix on 02 Mar 2024, the winner was "
        "Max Verstappen driving for Red Bull Racing Honda RBPT with a time of 1:31:44.742."
    )


def test_race_results_without_season_in_url() -> None:
    """URL에 시즌이 없으면 연도 없는 문장을 만드는지 검증한다."""

    text = RaceResultsExtractor(url_marker="example.com").extract(_RESULTS_HTML, "https://example.com/results")

    assert text.startswith("In the F1 Season, at the Bahrain Grand Prix")


def test_registry_selects_by_url_and_falls_back_on_empty() -> None:
    """URL 패턴으로 추출기를 고르고 결과가 비면 본문 추출로 대체하는지 검증한다."""

    registry = create_default_registry()
    results_url = "https://www.formula1.com/en/results/2025/races"

    assert registry.select(results_url).name == "race_results"
    assert registry.select("https://en.wikipedia.org/wiki/Formula_One").name == "body_text"
    assert registry.extract("<html><body><p>No table yet.</p></body></html>", results_url) == "No table yet."
