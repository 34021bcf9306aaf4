"""
Tests for the enum generation modes.
"""

from __future__ import annotations

from unittest import TestCase

from json_schema_to_typebox.pipeline import CodeGeneratorConfig, EnumMode
from json_schema_to_typebox.pipeline.emitter import ProgramAssembler

STATUS_SCHEMA = {
    "title": "Task",
    "type": "object",
    "properties": {"status": {"enum": ["active", "in-progress"]}},
    "required": ["status"],
}

STATUS_ENUM = 'export enum StatusEnum {\n  ACTIVE = "active",\n  IN_PROGRESS = "in-progress",\n}'
STATUS_UNION = 'export const StatusUnion = Type.Union([Type.Literal("active"), Type.Literal("in-progress")]);'


def generate(schema, enum_mode):
    config = CodeGeneratorConfig(enum_mode=enum_mode, add_generation_comment=False)
    return ProgramAssembler(config).assemble(schema)


class TestEnumModes(TestCase):
    def test_inline(self):
        code = generate(STATUS_SCHEMA, EnumMode.INLINE)
        self.assertIn('status: Type.Union([Type.Literal("active"), Type.Literal("in-progress")])', code)
        self.assertNotIn("StatusEnum", code)
        self.assertNotIn("StatusUnion", code)

    def test_enum(self):
        code = generate(STATUS_SCHEMA, EnumMode.ENUM)
        self.assertIn(STATUS_ENUM, code)
        self.assertIn("status: Type.Enum(StatusEnum)", code)
        self.assertNotIn("StatusUnion", code)

    def test_union(self):
        code = generate(STATUS_SCHEMA, EnumMode.UNION)
        self.assertIn(STATUS_UNION, code)
        self.assertIn("status: StatusUnion\n", code)
        self.assertNotIn("StatusEnum", code)

    def test_prefer_enum(self):
        code = generate(STATUS_SCHEMA, EnumMode.PREFER_ENUM)
        self.assertIn(STATUS_ENUM, code)
        self.assertIn(STATUS_UNION, code)
        self.assertIn("status: Type.Enum(StatusEnum)", code)
        self.assertLess(code.index(STATUS_ENUM), code.index(STATUS_UNION))

    def test_prefer_union(self):
        code = generate(STATUS_SCHEMA, EnumMode.PREFER_UNION)
        self.assertIn(STATUS_ENUM, code)
        self.assertIn(STATUS_UNION, code)
        self.assertIn("status: StatusUnion\n", code)

    def test_mode_from_string(self):
        config = CodeGeneratorConfig(enum_mode="preferUnion")
        self.assertEqual(config.enum_mode, EnumMode.PREFER_UNION)

    def test_declarations_precede_main_declaration(self):
        code = generate(STATUS_SCHEMA, EnumMode.ENUM)
        self.assertLess(code.index(STATUS_ENUM), code.index("export type Task"))

    def test_optional_enum_property(self):
        schema = {"type": "object", "properties": {"kind": {"enum": ["a", "b"]}}}
        code = generate(schema, EnumMode.ENUM)
        self.assertIn("kind: Type.Optional(Type.Enum(KindEnum))", code)


class TestEnumOptions(TestCase):
    SCHEMA = {
        "type": "object",
        "properties": {"level": {"enum": [1, 2], "description": "Level"}},
        "required": ["level"],
    }

    def test_options_on_enum_reference(self):
        code = generate(self.SCHEMA, EnumMode.PREFER_ENUM)
        self.assertIn('level: Type.Enum(LevelEnum, {"description":"Level"})', code)
        self.assertIn("export const LevelUnion = Type.Union([Type.Literal(1), Type.Literal(2)]);", code)
        self.assertIn("export enum LevelEnum {\n  _1 = 1,\n  _2 = 2,\n}", code)

    def test_options_on_union_declaration(self):
        code = generate(self.SCHEMA, EnumMode.UNION)
        self.assertIn('export const LevelUnion = Type.Union([Type.Literal(1), Type.Literal(2)], {"description":"Level"});', code)
        self.assertIn("level: LevelUnion\n", code)


class TestEnumFallbacks(TestCase):
    def test_values_that_cannot_form_an_enum_use_a_union(self):
        schema = {"type": "object", "properties": {"flag": {"enum": [True, None]}}, "required": ["flag"]}
        code = generate(schema, EnumMode.ENUM)
        self.assertNotIn("export enum", code)
        self.assertIn("export const FlagUnion = Type.Union([Type.Literal(true), Type.Null()]);", code)
        self.assertIn("flag: FlagUnion", code)

    def test_root_enum_named_after_title(self):
        code = generate({"title": "Color", "enum": ["red", "green"]}, EnumMode.ENUM)
        self.assertIn("export enum ColorEnum {", code)
        self.assertIn("export const Color = Type.Enum(ColorEnum);", code)

    def test_unnamed_enum_stays_inline(self):
        code = generate({"type": "array", "items": {"enum": ["x"]}}, EnumMode.ENUM)
        self.assertIn('export const T = Type.Array(Type.Union([Type.Literal("x")]));', code)
        self.assertNotIn("export enum", code)

    def test_duplicate_member_names(self):
        schema = {"type": "object", "properties": {"sep": {"enum": ["a-b", "a_b"]}}}
        code = generate(schema, EnumMode.ENUM)
        self.assertIn('  A_B = "a-b",\n  A_B_2 = "a_b",\n', code)

    def test_suffixed_member_names_do_not_collide(self):
        schema = {"type": "object", "properties": {"level": {"enum": ["A_2", "a", "A"]}}}
        code = generate(schema, EnumMode.ENUM)
        self.assertIn('  A_2 = "A_2",\n  A = "a",\n  A_3 = "A",\n', code)


class TestGeneratedNames(TestCase):
    def test_property_name_that_is_not_an_identifier(self):
        schema = {"type": "object", "properties": {"first-name": {"enum": ["x", "y"]}}, "required": ["first-name"]}
        code = generate(schema, EnumMode.ENUM)
        self.assertIn("export enum First_nameEnum {", code)
        self.assertIn('"first-name": Type.Enum(First_nameEnum)', code)

    def test_union_named_after_property_that_is_not_an_identifier(self):
        schema = {"type": "object", "properties": {"first-name": {"enum": ["x"]}}, "required": ["first-name"]}
        code = generate(schema, EnumMode.UNION)
        self.assertIn('export const First_nameUnion = Type.Union([Type.Literal("x")]);', code)
        self.assertIn('"first-name": First_nameUnion', code)

    def test_title_that_is_not_an_identifier(self):
        schema = {"title": "My Schema", "type": "object", "properties": {"a": {"type": "string"}}}
        code = generate(schema, EnumMode.INLINE)
        self.assertIn("export type My_Schema = Static<typeof My_Schema>;", code)
        self.assertIn("export const My_Schema = Type.Object(", code)

    def test_same_property_name_last_declaration_wins(self):
        schema = {
            "type": "object",
            "properties": {
                "a": {"type": "object", "properties": {"status": {"enum": ["x"]}}},
                "b": {"type": "object", "properties": {"status": {"enum": ["y"]}}},
            },
        }
        code = generate(schema, EnumMode.UNION)
        self.assertEqual(code.count("export const StatusUnion"), 1)
        self.assertIn('export const StatusUnion = Type.Union([Type.Literal("y")]);', code)
