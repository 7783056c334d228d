from lz77.cli import main


def test_encode_decode_files(tmp_path, sample_text):
    source = tmp_path / "coding.txt"
    tokens = tmp_path / "decoding.txt"
    target = tmp_path / "restored.txt"
    source.write_bytes(sample_text.encode("utf-8"))
    assert main(["encode", str(source), str(tokens)]) == 0
    assert main(["decode", str(tokens), str(target)]) == 0
    assert target.read_bytes() == source.read_bytes()


def test_ratio_output(tmp_path, capsys):
    source = tmp_path / "coding.txt"
    tokens = tmp_path / "decoding.txt"
    source.write_text("ABAB", encoding="utf-8")
    main(["encode", str(source), str(tokens)])
    capsys.readouterr()
    assert main(["ratio", str(source), str(tokens)]) == 0
    out = capsys.readouterr().out
    assert "Original bits: 32" in out
    assert "Encoded bits:  30" in out
    assert "Compression ratio: 1.07" in out


def test_tokens_listing(tmp_path, capsys):
    tokens = tmp_path / "decoding.txt"
    tokens.write_text("(0,0,A)\n\n(0,0,B)\n(2,2,eof)\n", encoding="utf-8")
    assert main(["tokens", str(tokens)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["(0,0,A)", "(0,0,B)", "(2,2,eof)", "Total tokens: 3"]


def test_malformed_token_file(tmp_path, capsys):
    tokens = tmp_path / "decoding.txt"
    tokens.write_text("(0,0,A)\n(a,2,x)\n", encoding="utf-8")
    assert main(["decode", str(tokens), str(tmp_path / "out.txt")]) == 1
    assert capsys.readouterr().err.startswith("error: Line 2")


def test_empty_source(tmp_path, capsys):
    source = tmp_path / "coding.txt"
    source.write_text("", encoding="utf-8")
    assert main(["encode", str(source), str(tmp_path / "decoding.txt")]) == 1
    assert "is empty" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["tokens", str(tmp_path / "absent.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_invalid_config_and_undecodable_source(tmp_path, capsys):
    source = tmp_path / "coding.txt"
    source.write_bytes(b"\xff\xfe\xfa")
    assert main(["--symbol-bits", "0", "tokens", str(source)]) == 1
    assert "symbol_bits must be positive" in capsys.readouterr().err
    assert main(["encode", str(source), str(tmp_path / "decoding.txt")]) == 1
    assert capsys.readouterr().err.startswith("error:")
