from huffcode import encode, decode


def test_encode_then_decode(tmp_path, capsys):
    src = tmp_path / "src.txt"
    text = "mississippi river\n"
    src.write_bytes(text.encode("ascii"))
    enc = tmp_path / "src.huff"
    out = tmp_path / "out.txt"

    assert encode.main(["--input", str(src), "--output", str(enc), "--table"]) == 0
    printed = capsys.readouterr().out
    assert f"[encode] wrote {enc}" in printed
    assert "'s'" in printed

    assert decode.main(["--source", str(src), "--input", str(enc), "--output", str(out)]) == 0
    assert "[decode] wrote" in capsys.readouterr().out
    assert out.read_bytes() == text.encode("ascii")


def test_encode_empty_input(tmp_path, capsys):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    assert encode.main(["--input", str(src), "--output", str(tmp_path / "x.huff")]) == 1
    assert "[encode] error" in capsys.readouterr().err


def test_decode_missing_source(tmp_path, capsys):
    rc = decode.main(["--source", str(tmp_path / "missing.txt"),
                      "--input", str(tmp_path / "x.huff"),
                      "--output", str(tmp_path / "out.txt")])
    assert rc == 1
    assert "[decode] error" in capsys.readouterr().err
