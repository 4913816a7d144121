import copy
import os
import typing

import pytest

from octorest.client import OctoPrintClient

API_KEY = "1234567890"


def pytest_load_initial_conftests(early_config, parser, args):
    """Conditionally append coverage report to GITHUB_STEP_SUMMARY.

    Only applies when running in GitHub Actions.
    """
    summary_file = os.getenv("GITHUB_STEP_SUMMARY")
    if (
        os.getenv("GITHUB_ACTIONS") == "true"
        and summary_file
        and not any(arg.startswith("--cov-report=markdown-append:") for arg in args)
    ):
        args.append(f"--cov-report=markdown-append:{summary_file}")


@pytest.fixture
def client():
    c = OctoPrintClient.builder("octopi.local", API_KEY).port(5000).build()
    yield c
    c.close()


_FILES_RESPONSE: dict[str, typing.Any] = {
    "files": [
        {
            "name": "whistle_v2.gcode",
            "path": "whistle_v2.gcode",
            "type": "machinecode",
            "typePath": ["machinecode", "gcode"],
            "hash": "...",
            "size": 1468987,
            "date": 1378847754,
            "origin": "local",
            "refs": {
                "resource": "http://example.com/api/files/local/whistle_v2.gcode",
                "download": "http://example.com/downloads/files/local/whistle_v2.gcode",
            },
            "gcodeAnalysis": {
                "estimatedPrintTime": 1188,
                "filament": {"length": 810, "volume": 5.36},
            },
            "print": {"failure": 4, "success": 23, "last": {"date": 1387144346, "success": True}},
        },
        {
            "name": "whistle_.gco",
            "path": "whistle_.gco",
            "type": "machinecode",
            "typePath": ["machinecode", "gcode"],
            "origin": "sdcard",
            "refs": {"resource": "http://example.com/api/files/sdcard/whistle_.gco"},
        },
        {
            "name": "folderA",
            "path": "folderA",
            "type": "folder",
            "typePath": ["folder"],
            "origin": "local",
            "children": [
                {
                    "name": "whistle_v2_copy.gcode",
                    "path": "folderA/whistle_v2_copy.gcode",
                    "type": "machinecode",
                    "typePath": ["machinecode", "gcode"],
                    "hash": "...",
                    "size": 1468987,
                    "date": 1378847754,
                    "origin": "local",
                    "refs": {
                        "resource": "http://example.com/api/files/local/folderA/whistle_v2_copy.gcode",
                        "download": "http://example.com/downloads/files/local/folderA/whistle_v2_copy.gcode",
                    },
                    "gcodeAnalysis": {
                        "estimatedPrintTime": 1188,
                        "filament": {"tool0": {"length": 810, "volume": 5.36}},
                    },
                }
            ],
            "size": 1468987,
            "refs": {"resource": "http://example.com/api/files/local/folderA"},
        },
    ],
    "free": "3.2GB",
}

_FILE_ENTRY: dict[str, typing.Any] = {
    "date": 1707166498,
    "display": "pushrod.gcode",
    "gcodeAnalysis": {
        "dimensions": {"depth": 99.349, "height": 5.0, "width": 142.374},
        "estimatedPrintTime": 1368.6617568899217,
        "filament": {"tool0": {"length": 1508.521400000127, "volume": 3.628419182080407}},
        "printingArea": {"maxX": 170.0, "maxY": 97.349, "maxZ": 5.0, "minX": 27.626, "minY": -2.0, "minZ": 0.0},
        "travelArea": {"maxX": 179.0, "maxY": 178.0, "maxZ": 35.0, "minX": 0.0, "minY": -2.0, "minZ": 0.0},
        "travelDimensions": {"depth": 180.0, "height": 35.0, "width": 179.0},
    },
    "name": "pushrod.gcode",
    "origin": "local",
    "path": "folder/pushrod.gcode",
    "refs": {
        "download": "http://127.0.0.1:5000/downloads/files/local/folder/pushrod.gcode",
        "resource": "http://127.0.0.1:5000/api/files/local/folder/pushrod.gcode",
    },
    "size": 801365,
    "type": "machinecode",
    "typePath": ["machinecode", "gcode"],
}

_PRINTER_RESPONSE: dict[str, typing.Any] = {
    "temperature": {
        "tool0": {"actual": 214.8821, "target": 220.0, "offset": 0},
        "tool1": {"actual": 25.3, "target": None, "offset": 0},
        "bed": {"actual": 50.221, "target": 70.0, "offset": 5},
        "history": [
            {
                "time": 1395651928,
                "tool0": {"actual": 214.8821, "target": 220.0},
                "tool1": {"actual": 25.3, "target": None},
                "bed": {"actual": 50.221, "target": 70.0},
            },
            {
                "time": 1395651926,
                "tool0": {"actual": 212.32, "target": 220.0},
                "tool1": {"actual": 25.1, "target": None},
                "bed": {"actual": 49.1123, "target": 70.0},
            },
        ],
    },
    "sd": {"ready": True},
    "state": {
        "text": "Operational",
        "flags": {
            "operational": True,
            "paused": False,
            "printing": False,
            "cancelling": False,
            "pausing": False,
            "sdReady": True,
            "error": False,
            "ready": True,
            "closedOrError": False,
        },
    },
}


@pytest.fixture
def files_response() -> dict[str, typing.Any]:
    return copy.deepcopy(_FILES_RESPONSE)


@pytest.fixture
def file_entry() -> dict[str, typing.Any]:
    return copy.deepcopy(_FILE_ENTRY)


@pytest.fixture
def printer_response() -> dict[str, typing.Any]:
    return copy.deepcopy(_PRINTER_RESPONSE)
