from wasmpack.tool import Tool


def test_wasm_bindgen_name():
    tool = Tool("wasm-bindgen")
    assert str(tool) == "wasm-bindgen"


def test_cargo_generate_name():
    tool = Tool("cargo-generate")
    assert str(tool) == "cargo-generate"


def test_lookup_by_name_round_trips():
    for tool in Tool:
        assert Tool(str(tool)) is tool