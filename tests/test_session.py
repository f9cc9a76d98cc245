import xml.etree.ElementTree as ET
from datetime import datetime

import httpx
import pytest

from surf_log_common import meters_to_feet

from data.pipelines.buoy import BuoyXMLFetcher
from data.pipelines.config import StationProfile
from data.pipelines.noaa import NOAATideFetcher
from data.pipelines.observations import MissingDataError, Observation, ParseError
from data.session import (
    SessionConditions,
    SessionWindow,
    collect_conditions,
    format_value,
    render_observation,
    render_session,
)

PROFILE = StationProfile(tide_station="9414290", wind_station="SF01", wave_station="46237")


class FakeTideFetcher:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def fetch_tide_predictions(self, station_id, begin_date, end_date):
        self.calls.append((station_id, begin_date, end_date))
        return self.payload


class FakeWindFetcher:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def fetch_wind_observations(self, station_id, begin_date, end_date):
        self.calls.append((station_id, begin_date, end_date))
        return self.payload


class FakeBuoyFetcher:
    def __init__(self, xml):
        self.xml = xml
        self.calls = []

    def fetch_observation_document(self, station_id):
        self.calls.append(station_id)
        return ET.fromstring(self.xml)


def make_fetchers(tide=None, wind=None, xml=None):
    return (
        FakeTideFetcher(tide if tide is not None else {"predictions": [{"v": "2.1"}, {"v": "1.4"}]}),
        FakeWindFetcher(wind if wind is not None else [{}, {"data": [{"s": "6", "dr": "W"}, {"s": "11", "dr": "WNW"}]}]),
        FakeBuoyFetcher(xml if xml is not None else '<obs><m name="SwellHeight">1</m><m name="SwellPeriod">15</m></obs>'),
    )


def test_session_window_parse() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")

    assert window.start == datetime(2026, 10, 17, 7, 0)
    assert window.end == datetime(2026, 10, 17, 9, 15)


@pytest.mark.parametrize(
    "date, start, end",
    [("2026-10-17", "09:00", "08:00"), ("2026-10-17", "09:00", "09:00"), ("17/10/2026", "07:00", "08:00")],
)
def test_session_window_rejects_bad_input(date, start, end) -> None:
    with pytest.raises(ValueError):
        SessionWindow.parse(date, start, end)


def test_collect_conditions_queries_each_station() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    tide, wind, buoy = make_fetchers()

    conditions = collect_conditions(window, PROFILE, tide, wind, buoy)

    assert tide.calls == [("9414290", window.start, window.end)]
    assert wind.calls == [("SF01", window.start, window.end)]
    assert buoy.calls == ["46237"]
    assert [obs.label for obs in conditions.observations()] == [
        "tide-start",
        "tide-end",
        "wind-knots-start",
        "wind-direction-start",
        "wind-knots-end",
        "wind-direction-end",
        "swell-height",
        "swell-period",
    ]


def test_collect_conditions_propagates_extraction_errors() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    tide, wind, buoy = make_fetchers(tide={"predictions": []})

    with pytest.raises(MissingDataError):
        collect_conditions(window, PROFILE, tide, wind, buoy)


def test_collect_conditions_can_tolerate_missing_sections() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    tide, wind, buoy = make_fetchers(wind=[{}, {"data": []}], xml="<obs/>")

    conditions = collect_conditions(window, PROFILE, tide, wind, buoy, tolerate_missing=True)

    assert len(conditions.tide) == 2
    assert conditions.wind == []
    assert conditions.waves == []


@pytest.mark.parametrize(
    "value, expected",
    [(5, "5"), (3.28084, "3.28"), (12.0, "12"), (4.999, "5"), ("1.2 ft", "1.2 ft"), ("NW", "NW")],
)
def test_format_value(value, expected) -> None:
    assert format_value(value) == expected


def test_render_observation_upper_cases_label() -> None:
    assert render_observation(Observation("swell-direction", "WSW")) == ":SWELL-DIRECTION: WSW"
    assert render_observation(("wind-knots-start", 7.5)) == ":WIND-KNOTS-START: 7.5"


def test_render_session() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    conditions = SessionConditions(
        tide=[Observation("tide-start", "2.1 ft"), Observation("tide-end", "1.4 ft")],
        wind=[Observation("wind-knots-start", 6), Observation("wind-direction-start", "W")],
        waves=[Observation("swell-height", 3.28084)],
    )

    assert render_session(window, conditions) == (
        "* Surf session <2026-10-17 Sat 07:00>--<2026-10-17 Sat 09:15>\n"
        ":PROPERTIES:\n"
        ":SESSION-START: 2026-10-17 07:00\n"
        ":SESSION-END: 2026-10-17 09:15\n"
        ":TIDE-START: 2.1 ft\n"
        ":TIDE-END: 1.4 ft\n"
        ":WIND-KNOTS-START: 6\n"
        ":WIND-DIRECTION-START: W\n"
        ":SWELL-HEIGHT: 3.28\n"
        ":SPOT:\n"
        ":BOARD:\n"
        ":END:\n"
        "** Summary\n"
        "(summary)\n"
    )


def html_client() -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>")))


def test_collect_conditions_tolerates_malformed_buoy_document() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    tide, wind, _ = make_fetchers()
    buoy = BuoyXMLFetcher("https://buoy.test/latest", client=html_client())

    conditions = collect_conditions(window, PROFILE, tide, wind, buoy, tolerate_missing=True)

    assert conditions.waves == []
    assert len(conditions.wind) == 4


def test_collect_conditions_malformed_buoy_document_propagates() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    tide, wind, _ = make_fetchers()
    buoy = BuoyXMLFetcher("https://buoy.test/latest", client=html_client())

    with pytest.raises(ParseError):
        collect_conditions(window, PROFILE, tide, wind, buoy)


def test_collect_conditions_tolerates_non_json_tide_response() -> None:
    window = SessionWindow.parse("2026-10-17", "07:00", "09:15")
    _, wind, buoy = make_fetchers()
    tide = NOAATideFetcher(client=html_client())

    conditions = collect_conditions(window, PROFILE, tide, wind, buoy, tolerate_missing=True)

    assert conditions.tide == []
    assert [obs.label for obs in conditions.waves] == ["swell-height", "swell-period"]


def test_render_rounds_display_but_keeps_value() -> None:
    obs = Observation("swell-height", meters_to_feet("1.5"))

    assert obs.value == pytest.approx(4.92126)
    assert render_observation(obs) == ":SWELL-HEIGHT: 4.92"
