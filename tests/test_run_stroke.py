from pathlib import Path

import numpy as np
import pytest

from src.penstroke.config import ContourType, StrokeConfig
from src.run_stroke import build_stroke, load_samples_csv, main


def _write_csv(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_samples_skips_header_and_blank_lines(tmp_path: Path) -> None:
    csv_path = _write_csv(
        tmp_path / "s.csv", "x,y,radius\n0,0,2\n\n10,0,2.5\n20,5,3\n"
    )
    samples = load_samples_csv(csv_path)
    np.testing.assert_allclose(
        samples, np.array([[0.0, 0.0, 2.0], [10.0, 0.0, 2.5], [20.0, 5.0, 3.0]])
    )


@pytest.mark.parametrize(
    "text",
    [
        "x,y,radius\n",
        "0,0,1\n5,oops,1\n",
        "0,0\n",
    ],
)
def test_load_samples_rejects_bad_input(tmp_path: Path, text: str) -> None:
    csv_path = _write_csv(tmp_path / "bad.csv", text)
    with pytest.raises(ValueError):
        load_samples_csv(csv_path)


def test_build_stroke_flushes_and_smooths() -> None:
    samples = np.array([[0.0, 0.0, 2.0], [10.0, 0.0, 2.0], [20.0, 0.0, 2.0]])
    cfg = StrokeConfig(direction_bias_level=0.0, input_buffer_size=2)
    stroke = build_stroke(samples, ContourType.CIRCLE_SEQUENCE, cfg)
    assert [v.x for v in stroke.spine] == pytest.approx([0.0, 10.0, 15.0, 20.0])

    smoothed = build_stroke(
        samples, ContourType.CIRCLE_SEQUENCE, cfg, smooth=1, upscale=2
    )
    assert len(smoothed.spine) == 1 + 2 * 4
    assert smoothed.spine[-1].x == pytest.approx(20.0)


def test_main_writes_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rows = "\n".join(f"{3.0 * k},{np.sin(k / 3.0) * 10.0:.4f},4" for k in range(30))
    csv_path = _write_csv(tmp_path / "in.csv", rows + "\n")
    out = tmp_path / "out.svg"
    main(
        [
            "--input",
            csv_path,
            "--output",
            str(out),
            "--contour",
            "tangents",
            "--smooth",
            "2",
        ]
    )
    assert out.exists()
    assert "<path" in out.read_text(encoding="utf-8")
    assert "Saved:" in capsys.readouterr().out


def test_main_rejects_bad_upscale(tmp_path: Path) -> None:
    csv_path = _write_csv(tmp_path / "in.csv", "0,0,1\n5,0,1\n")
    with pytest.raises(ValueError):
        main(
            [
                "--input",
                csv_path,
                "--output",
                str(tmp_path / "o.svg"),
                "--upscale",
                "0",
            ]
        )
