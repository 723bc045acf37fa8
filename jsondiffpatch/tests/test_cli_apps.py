# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

import pytest

import jsondiffpatch
from jsondiffpatch import json_equal
from jsondiffpatch.diffapp import main_diff
from jsondiffpatch.patchapp import main_patch
from jsondiffpatch.__main__ import main_dispatch
from jsondiffpatch import (
    diffapp,
    patchapp,
)
from jsondiffpatch.patch_format import parse_patch
from jsondiffpatch.utils import EXPLICIT_MISSING_FILE

from .utils import read_json_file


def test_jsondiff_app(filespath, capsys, reset_log_level):
    afn = os.path.join(filespath, "source.json")
    bfn = os.path.join(filespath, "target.json")

    args = diffapp._build_arg_parser().parse_args(
        [afn, bfn, '--no-color', '--log-level=WARN'])
    assert 0 == main_diff(args)
    assert args.log_level == 'WARN'
    assert jsondiffpatch.log.logger.level == logging.WARN

    out = capsys.readouterr().out
    assert out.startswith("jsondiff %s %s\n" % (afn, bfn))
    assert "## copy from /limits to /defaults:" in out
    assert "## add /description:\n+  JSON Pointer and JSON Patch\n" in out
    assert "## move from /owner to /maintainer:" in out
    assert "## replace /enabled:\n+  False\n" in out
    assert "## remove /tags/3:" in out
    assert "\x1b[" not in out


def test_jsondiff_app_color(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    bfn = os.path.join(filespath, "target.json")
    assert 0 == diffapp.main([afn, bfn])
    out = capsys.readouterr().out
    assert "\x1b[" in out


def test_jsondiff_app_equal_files(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    assert 0 == diffapp.main([afn, afn])
    assert capsys.readouterr().out == ""


def test_jsondiff_app_out_file(filespath, tmpdir):
    afn = os.path.join(filespath, "source.json")
    bfn = os.path.join(filespath, "target.json")
    dfn = str(tmpdir.join("patch.json"))

    assert 0 == diffapp.main([afn, bfn, '--out', dfn])
    wire = read_json_file(dfn)
    assert [e["op"] for e in wire] == ["copy", "add", "move", "replace", "remove", "remove"]

    a = read_json_file(afn)
    b = read_json_file(bfn)
    assert json_equal(jsondiffpatch.patch(a, parse_patch(wire)), b)


def test_jsondiff_app_null_file(filespath, tmpdir):
    fn = os.path.join(filespath, "source.json")
    dfn = str(tmpdir.join("patch.json"))

    args = diffapp._build_arg_parser().parse_args([fn, EXPLICIT_MISSING_FILE, '--out', dfn])
    assert 0 == main_diff(args)
    assert read_json_file(dfn) == [{"op": "replace", "path": "", "value": None}]

    args = diffapp._build_arg_parser().parse_args([EXPLICIT_MISSING_FILE, fn, '--out', dfn])
    assert 0 == main_diff(args)
    assert read_json_file(dfn)[0]["op"] == "replace"


def test_jsondiff_app_missing_file(filespath, capsys):
    fn = os.path.join(filespath, "source.json")
    missing = os.path.join(filespath, "does-not-exist.json")
    assert 1 == diffapp.main([fn, missing])
    assert "Missing file %s" % missing in capsys.readouterr().out


def test_jsonpatch_app(filespath, tmpdir):
    afn = os.path.join(filespath, "source.json")
    pfn = os.path.join(filespath, "source-target-patch.json")
    ofn = str(tmpdir.join("result.json"))

    assert 0 == patchapp.main([afn, pfn, '-o', ofn])
    assert json_equal(read_json_file(ofn), read_json_file(os.path.join(filespath, "target.json")))
    # Input is left untouched
    assert read_json_file(afn)["owner"] == {"login": "alice", "id": 1}


def test_jsonpatch_app_in_place(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    pfn = os.path.join(filespath, "source-target-patch.json")

    assert 0 == patchapp.main([afn, pfn, '--in-place'])
    result = json.loads(capsys.readouterr().out)
    assert json_equal(result, read_json_file(os.path.join(filespath, "target.json")))


def test_jsonpatch_app_prints_result(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    pfn = os.path.join(filespath, "source-target-patch.json")

    args = patchapp._build_arg_parser().parse_args([afn, pfn, '--indent', '4'])
    assert 0 == main_patch(args)
    out = capsys.readouterr().out
    assert '\n    "name": "jsondiffpatch"' in out
    assert json_equal(json.loads(out), read_json_file(os.path.join(filespath, "target.json")))


def test_jsonpatch_app_unknown_op(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    pfn = os.path.join(filespath, "unknown-op-patch.json")

    assert 1 == patchapp.main([afn, pfn])
    capsys.readouterr()

    assert 0 == patchapp.main([afn, pfn, '--skip-unknown'])
    result = json.loads(capsys.readouterr().out)
    assert result["added"] == 1


def test_jsonpatch_app_failing_test(filespath, capsys, caplog):
    afn = os.path.join(filespath, "source.json")
    pfn = os.path.join(filespath, "failing-test-patch.json")
    with caplog.at_level(logging.ERROR, logger="jsondiffpatch"):
        assert 1 == patchapp.main([afn, pfn])
    assert "Test failed at '/enabled'" in caplog.text
    assert capsys.readouterr().out == ""


def test_jsonpatch_app_relative_to(tmpdir, capsys):
    dfn = str(tmpdir.join("doc.json"))
    pfn = str(tmpdir.join("patch.json"))
    with io.open(dfn, "w", encoding="utf8") as f:
        json.dump({"config": {"tags": ["a"]}}, f)
    with io.open(pfn, "w", encoding="utf8") as f:
        json.dump([{"op": "add", "path": "/-", "value": "b"}], f)

    assert 0 == patchapp.main([dfn, pfn, '--relative-to', '/config/tags'])
    assert json.loads(capsys.readouterr().out) == {"config": {"tags": ["a", "b"]}}


def test_jsonpatch_app_null_files(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    # A null patch is an empty patch
    assert 0 == patchapp.main([afn, EXPLICIT_MISSING_FILE])
    assert json.loads(capsys.readouterr().out) == read_json_file(afn)


def test_jsonpatch_app_missing_file(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    missing = os.path.join(filespath, "does-not-exist.json")
    assert 1 == patchapp.main([afn, missing])
    assert "Missing file %s" % missing in capsys.readouterr().out


def test_main_dispatch(filespath, capsys):
    afn = os.path.join(filespath, "source.json")
    bfn = os.path.join(filespath, "target.json")
    pfn = os.path.join(filespath, "source-target-patch.json")

    assert 0 == main_dispatch(["diff", afn, bfn, "--no-color"])
    assert "## move from /owner to /maintainer:" in capsys.readouterr().out

    assert 0 == main_dispatch(["patch", afn, pfn])
    assert json_equal(json.loads(capsys.readouterr().out), read_json_file(bfn))


def test_main_dispatch_options(capsys):
    with pytest.raises(SystemExit) as exc:
        main_dispatch(["--version"])
    assert exc.value.code == jsondiffpatch.__version__

    with pytest.raises(SystemExit) as exc:
        main_dispatch(["-h"])
    assert "Usage: jsondiffpatch" in exc.value.code

    with pytest.raises(SystemExit) as exc:
        main_dispatch([])
    assert "Option missing" in exc.value.code

    with pytest.raises(SystemExit) as exc:
        main_dispatch(["frobnicate"])
    assert "Unrecognized command 'frobnicate'" in exc.value.code


def test_main_dispatch_config(capsys):
    with pytest.raises(SystemExit) as exc:
        main_dispatch(["--config"])
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "JsonDiff:" in err
    assert "JsonPatchApply:" in err
    assert "unknown_op" in err
