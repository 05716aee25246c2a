import xml.etree.ElementTree as ET

from pycircuitlessons.rendering.surface import DrawingSurface, _num

SVG = "{http://www.w3.org/2000/svg}"


class TestDrawingSurfaceUnit:
    def test_header_defines_grid_glow_and_arrowhead(self):
        surface = DrawingSurface(800, 600)
        surface.start()
        root = ET.fromstring(surface.build())

        assert root.tag == f"{SVG}svg"
        assert root.get("viewBox") == "0 0 800 600"
        ids = {el.get("id") for el in root.find(f"{SVG}defs")}
        assert ids == {"grid", "glow", "arrowhead"}

        rects = root.findall(f"{SVG}rect")
        assert rects[0].get("fill") == "#f8fcff"
        assert rects[1].get("fill") == "url(#grid)"

    def test_start_is_idempotent(self):
        surface = DrawingSurface()
        surface.start()
        surface.add_circle(10, 10, 5)
        surface.start()
        root = ET.fromstring(surface.build())
        assert len(root.findall(f"{SVG}defs")) == 1
        assert len(root.findall(f"{SVG}circle")) == 1

    def test_shapes_appended_in_order(self):
        surface = DrawingSurface()
        surface.start()
        surface.add_rectangle(0, 0, 10, 10, "#fff", "#000", 2, 4)
        surface.add_line(0, 0, 5, 5, linecap="round")
        surface.add_text(1, 2, "hello", 12, weight="bold")
        root = ET.fromstring(surface.build())

        tags = [child.tag.replace(SVG, "") for child in root][3:]
        assert tags == ["rect", "line", "text"]
        rect = root.findall(f"{SVG}rect")[2]
        assert rect.get("rx") == "4"
        assert root.find(f"{SVG}line").get("stroke-linecap") == "round"
        text = root.find(f"{SVG}text")
        assert text.text == "hello"
        assert text.get("font-weight") == "bold"

    def test_zero_length_line_is_rendered_as_given(self):
        surface = DrawingSurface()
        surface.add_line(20, 20, 20, 20)
        line = ET.fromstring(surface.build()).find(f"{SVG}line")
        assert (line.get("x1"), line.get("x2")) == ("20", "20")

    def test_cubic_path_data(self):
        surface = DrawingSurface()
        surface.add_cubic((0, 0), (30, 0), (70, 100), (100, 100), "#f00", 4)
        path = ET.fromstring(surface.build()).find(f"{SVG}path")
        assert path.get("d") == "M 0 0 C 30 0, 70 100, 100 100"
        assert path.get("fill") == "none"
        assert path.get("stroke-width") == "4"

    def test_group_nests_shapes(self):
        surface = DrawingSurface()
        with surface.group(css_class="component led", element_id="led1"):
            surface.add_circle(0, 0, 3)
        surface.add_circle(5, 5, 3)
        root = ET.fromstring(surface.build())

        group = root.find(f"{SVG}g")
        assert group.get("id") == "led1"
        assert group.get("class") == "component led"
        assert len(group.findall(f"{SVG}circle")) == 1
        assert len(root.findall(f"{SVG}circle")) == 1

    def test_highlight_box_is_dashed_and_glowing(self):
        surface = DrawingSurface()
        surface.add_highlight_box(10, 20, 30, 40)
        rect = ET.fromstring(surface.build()).findall(f"{SVG}rect")[-1]
        assert rect.get("stroke-dasharray") == "8,4"
        assert rect.get("filter") == "url(#glow)"
        assert rect.get("fill") == "none"

    def test_arrow_with_label(self):
        surface = DrawingSurface()
        surface.add_arrow(0, 0, 100, 0, label="current")
        root = ET.fromstring(surface.build())
        assert root.find(f"{SVG}line").get("marker-end") == "url(#arrowhead)"
        label = root.find(f"{SVG}text")
        assert label.text == "current"
        assert label.get("x") == "50"
        assert label.get("y") == "-10"

    def test_build_is_repeatable(self):
        surface = DrawingSurface()
        surface.add_circle(1, 1, 1)
        assert surface.build() == surface.build()

    def test_additions_after_end_are_ignored(self, caplog):
        surface = DrawingSurface()
        surface.add_circle(1, 1, 1)
        surface.end()
        before = surface.build()
        surface.add_circle(2, 2, 2)
        assert surface.closed
        assert surface.build() == before
        assert "after the document footer" in caplog.text

    def test_save_writes_utf8_with_declaration(self, tmp_path):
        surface = DrawingSurface()
        surface.add_text(0, 0, "✓ done")
        path = tmp_path / "out.svg"
        surface.save(path)
        content = path.read_text(encoding="utf-8")
        assert content.startswith("<?xml")
        assert "✓ done" in content


def test_num_formats_compactly():
    assert _num(150.0) == "150"
    assert _num(112.5) == "112.5"
    assert _num(-12) == "-12"
