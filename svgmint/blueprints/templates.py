"""Source templates per blueprint, filled with ``str.format``."""

from __future__ import annotations

TS_INTERFACE_TEMPLATE = "export interface {symbol}Context {body}\n"

TS_CONST_TEMPLATE = "export const {symbol} = {literal};\n"

TS_EXPORT_TEMPLATE = "export {{ {names} }} from './{module}';"

# Angular

NG_ASSET_HELPERS_TEMPLATE = r"""
export function getNgSvgTemplate(svg: any, context: string = 'context'): string {{
  const css = svg.css ? svg.css.replace(/{{{{(.+?)}}}}/g, `{{{{${{context}}.$1}}}}`) : '';
  return `<svg [attr.class]="'{class_prefix}-'+${{context}}.uuid" [attr.width]="width" [attr.height]="height" [attr.viewBox]="viewBox">@@@styles@@@${{svg.svg}}</svg>`
    .replace(/ (\S+?)=['"]{{{{(.+?)}}}}['"]/g, ` [attr.$1]="${{context}}.$2"`)
    .replace(/{{{{(.+?)}}}}/g, `{{{{${{context}}.$1}}}}`)
    .replace('@@@styles@@@', css ? `<style>${{css}}</style>` : '');
}}

export function getSVGViewbox(viewBox: any): string {{
  return viewBox ? [viewBox.minx, viewBox.miny, viewBox.width, viewBox.height].join(' ') : '';
}}
"""

NG_COMPONENT_TEMPLATE = """import {{
  ChangeDetectionStrategy,
  ChangeDetectorRef,
  Component,
  Input,
  OnInit
}} from '@angular/core';
import {{
  {symbol},
  {symbol}Context,
  getNgSvgTemplate,
  getSVGViewbox
}} from '../assets';

@Component({{
  selector: '{selector}',
  template: getNgSvgTemplate({symbol}),
  changeDetection: ChangeDetectionStrategy.OnPush
}})
export class {symbol}Component implements OnInit {{
  static UUID = 0;
  private _context: {symbol}Context = {{ ...{symbol}.contextDefaults }};
  @Input() width: number | string = {width};
  @Input() height: number | string = {height};
  @Input() viewBox: string = getSVGViewbox({view_box});
  @Input()
  set context(ctx: {symbol}Context) {{
    this.updateContext(ctx);
  }}
  get context(): {symbol}Context {{
    return this._context;
  }}
  constructor(private ref: ChangeDetectorRef) {{}}
  ngOnInit() {{
    this._context.uuid = {symbol}Component.UUID++;
  }}
  updateContext(ctx: {symbol}Context) {{
    this._context = {{ ...{symbol}.contextDefaults, ...this._context, ...ctx }};
    this.ref.markForCheck();
  }}
}}
"""

NG_COMPONENT_EXPORT_TEMPLATE = "export {{ {symbol}Component }} from './{name}.component';"

NG_MODULE_TEMPLATE = """import {{ NgModule }} from '@angular/core';
import {{ CommonModule }} from '@angular/common';
{imports}
const components = [{components}];

@NgModule({{
  declarations: [...components],
  exports: [...components],
  imports: [CommonModule]
}})
export class {module_symbol}Module {{}}
"""

NG_MODULE_IMPORT_TEMPLATE = """import {{
  {components}
}} from './components';
"""
