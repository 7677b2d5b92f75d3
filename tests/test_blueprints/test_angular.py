"""Tests for the angular blueprint and the JSON manifest."""

import json

from tests.conftest import DYNAMIC_RECORD as DYNAMIC, STATIC_RECORD as STATIC

from svgmint.blueprints import get_blueprint
from svgmint.blueprints.angular import AngularBlueprint
from svgmint.blueprints.manifest import build_manifest, manifest_path, write_manifest
from svgmint.blueprints.typescript import render_module
from svgmint.config import Settings


def _blueprint(tmp_path, **kwargs) -> AngularBlueprint:
    return AngularBlueprint(Settings(output=str(tmp_path), module="my-icons", blueprint="angular", **kwargs))


def test_registered():
    assert get_blueprint("angular") is AngularBlueprint


def test_dynamic_record_gets_a_component(tmp_path):
    written = _blueprint(tmp_path).save_file(DYNAMIC)
    assert written == [
        str(tmp_path / "my-icons" / "assets" / "icon.ts"),
        str(tmp_path / "my-icons" / "components" / "icon.component.ts"),
    ]
    assert (tmp_path / "my-icons" / "assets" / "icon.ts").read_text(encoding="utf-8") == render_module(DYNAMIC)


def test_static_record_is_data_only(tmp_path):
    written = _blueprint(tmp_path).save_file(STATIC)
    assert written == [str(tmp_path / "my-icons" / "assets" / "static-star.ts")]
    assert not (tmp_path / "my-icons" / "components").exists()


def test_render_component(tmp_path):
    source = _blueprint(tmp_path).render(DYNAMIC)
    assert "selector: 'my-icons-icon'" in source
    assert "export class IconComponent implements OnInit {" in source
    assert "static UUID = 0;" in source
    assert "this._context.uuid = IconComponent.UUID++;" in source
    assert "@Input() width: number | string = 24;" in source
    assert "getSVGViewbox(null)" in source
    assert "template: getNgSvgTemplate(Icon)," in source


def test_render_component_with_view_box(tmp_path):
    record = DYNAMIC.model_copy(update={"view_box": STATIC.view_box, "width": "100%", "height": "100%"})
    source = _blueprint(tmp_path).render(record)
    assert "getSVGViewbox(Icon.viewBox)" in source
    assert "@Input() height: number | string = '100%';" in source


def test_index_files(tmp_path):
    blueprint = _blueprint(tmp_path)
    for record in (DYNAMIC, STATIC):
        blueprint.save_file(record)
    blueprint.generate_index_file([DYNAMIC, STATIC])
    root = tmp_path / "my-icons"

    assets = (root / "assets" / "index.ts").read_text(encoding="utf-8")
    assert assets.startswith("export { Icon, IconContext } from './icon';\nexport { StaticStar } from './static-star';\n")
    assert "export function getNgSvgTemplate(svg: any, context: string = 'context'): string {" in assets
    assert "[attr.class]=\"'${svg.svgHash}-'+${context}.uuid\"" in assets
    assert ".replace(/{{(.+?)}}/g, `{{${context}.$1}}`)" in assets
    assert "export function getSVGViewbox(viewBox: any): string {" in assets

    components = (root / "components" / "index.ts").read_text(encoding="utf-8")
    assert components == "export { IconComponent } from './icon.component';\n"

    module = (root / "my-icons.module.ts").read_text(encoding="utf-8")
    assert "import {\n  IconComponent\n} from './components';" in module
    assert "const components = [IconComponent];" in module
    assert "export class MyIconsModule {}" in module


def test_module_without_components(tmp_path):
    blueprint = _blueprint(tmp_path)
    blueprint.generate_index_file([STATIC])
    module = (tmp_path / "my-icons" / "my-icons.module.ts").read_text(encoding="utf-8")
    assert "./components" not in module
    assert "const components = [];" in module


def test_scope_by_module_class_prefix(tmp_path):
    blueprint = _blueprint(tmp_path, scope_by_module=True)
    blueprint.generate_index_file([DYNAMIC])
    assets = (tmp_path / "my-icons" / "assets" / "index.ts").read_text(encoding="utf-8")
    assert "[attr.class]=\"'my-icons-'+${context}.uuid\"" in assets


def test_manifest(tmp_path):
    settings = Settings(output=str(tmp_path), module="icons")
    path = write_manifest(settings, [DYNAMIC, STATIC])
    assert path == manifest_path(settings) == str(tmp_path / "icons.svgmint.json")

    data = json.loads((tmp_path / "icons.svgmint.json").read_text(encoding="utf-8"))
    assert data == build_manifest("icons", [DYNAMIC, STATIC])
    assert data["module"] == "icons"
    assert data["exports"] == ["icon", "static-star"]
    assert "path" not in data["files"][0]
    assert data["files"][0]["svgHash"] == "abc123"
    assert data["files"][1]["viewBox"]["width"] == 10
