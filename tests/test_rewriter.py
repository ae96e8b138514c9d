"""
Tests for import path rewriting.

Cases mirror the shapes produced by shadcn-vue component trees: barrel
re-exports, alias paths, relative paths and per-component directories.
"""

import pytest

from kebab_rename.errors import FileRewriteError
from kebab_rename.rename_map import RenameMap
from kebab_rename.rewriter import rewrite_file, rewrite_text


REWRITE_CASES = [
    (
        "basic import",
        "import Accordion from './Accordion.vue'\nimport Button from './Button.vue'",
        "import Accordion from './accordion.vue'\nimport Button from './button.vue'",
        {"Accordion": "accordion", "Button": "button"},
    ),
    (
        "barrel exports",
        "export { default as Accordion } from './Accordion.vue'\n"
        "export { default as AccordionContent } from './AccordionContent.vue'\n"
        "export { default as AccordionItem } from './AccordionItem.vue'\n"
        "export { default as AccordionTrigger } from './AccordionTrigger.vue'",
        "export { default as Accordion } from './accordion.vue'\n"
        "export { default as AccordionContent } from './accordion-content.vue'\n"
        "export { default as AccordionItem } from './accordion-item.vue'\n"
        "export { default as AccordionTrigger } from './accordion-trigger.vue'",
        {
            "Accordion": "accordion",
            "AccordionContent": "accordion-content",
            "AccordionItem": "accordion-item",
            "AccordionTrigger": "accordion-trigger",
        },
    ),
    (
        "alias imports",
        "import Button from '@/components/ui/Button.vue'\n"
        "import Input from '~/components/ui/Input.vue'\n"
        "import { Dialog } from '@/components/ui/Dialog'",
        "import Button from '@/components/ui/button.vue'\n"
        "import Input from '~/components/ui/input.vue'\n"
        "import { Dialog } from '@/components/ui/dialog'",
        {"Button": "button", "Input": "input", "Dialog": "dialog"},
    ),
    (
        "relative path imports",
        "import Card from '../Card.vue'\n"
        "import { Avatar } from '../../Avatar'\n"
        "import Select from './Select/Select.vue'",
        "import Card from '../card.vue'\n"
        "import { Avatar } from '../../avatar'\n"
        "import Select from './select/select.vue'",
        {"Card": "card", "Avatar": "avatar", "Select": "select"},
    ),
    (
        "mixed content",
        "import { Button } from '@/components/ui/Button'\n\n"
        "import ButtonGroup from './ButtonGroup.vue'\n"
        "export { default as ButtonIcon } from './ButtonIcon.vue'\n\n"
        "const template = '<Button>Click me</Button>'",
        "import { Button } from '@/components/ui/button'\n\n"
        "import ButtonGroup from './button-group.vue'\n"
        "export { default as ButtonIcon } from './button-icon.vue'\n\n"
        "const template = '<Button>Click me</Button>'",
        {"Button": "button", "ButtonGroup": "button-group", "ButtonIcon": "button-icon"},
    ),
    (
        "directory paths",
        "import Dialog from '@/components/ui/Dialog/Dialog.vue'\n"
        "import { DialogContent } from '@/components/ui/Dialog/DialogContent'",
        "import Dialog from '@/components/ui/dialog/dialog.vue'\n"
        "import { DialogContent } from '@/components/ui/dialog/dialog-content'",
        {"Dialog": "dialog", "DialogContent": "dialog-content"},
    ),
    (
        "no extension imports",
        "import { Tabs } from '@/components/ui/Tabs'\n"
        "import { TabsList } from '@/components/ui/TabsList'",
        "import { Tabs } from '@/components/ui/tabs'\n"
        "import { TabsList } from '@/components/ui/tabs-list'",
        {"Tabs": "tabs", "TabsList": "tabs-list"},
    ),
    (
        "destructured imports",
        "import { Popover, PopoverContent, PopoverTrigger } from '@/components/ui/Popover'",
        "import { Popover, PopoverContent, PopoverTrigger } from '@/components/ui/popover'",
        {"Popover": "popover", "PopoverContent": "popover-content", "PopoverTrigger": "popover-trigger"},
    ),
    (
        "double quotes and dynamic import",
        'import Sheet from "./Sheet.vue"\nconst Lazy = () => import("./SheetContent.vue")',
        'import Sheet from "./sheet.vue"\nconst Lazy = () => import("./sheet-content.vue")',
        {"Sheet": "sheet", "SheetContent": "sheet-content"},
    ),
]


@pytest.mark.parametrize(
    "source, expected, renames",
    [case[1:] for case in REWRITE_CASES],
    ids=[case[0] for case in REWRITE_CASES],
)
def test_rewrite_text(source, expected, renames):
    assert rewrite_text(source, RenameMap.from_dict(renames)) == expected


class TestRewriteText:

    def test_prefix_names_do_not_collide(self):
        renames = {"Accordion": "accordion"}
        text = "export { default as AccordionTrigger } from './AccordionTrigger.vue'"

        assert rewrite_text(text, renames) == text

    def test_template_tags_untouched(self):
        text = (
            "<template>\n  <Dialog>\n    <DialogContent />\n  </Dialog>\n</template>\n"
            "<script setup lang=\"ts\">\n"
            "import { Dialog, DialogContent } from '@/components/ui/Dialog'\n"
            "</script>\n"
        )
        expected = text.replace("ui/Dialog'", "ui/dialog'")

        assert rewrite_text(text, {"Dialog": "dialog", "DialogContent": "dialog-content"}) == expected

    def test_prose_in_template_untouched(self):
        text = '<template>\n  <p>Values copied from "Card" settings</p>\n</template>\n'

        assert rewrite_text(text, {"Card": "card"}) == text

    def test_prose_after_script_untouched(self):
        text = (
            "<script>\n"
            "import Card from './Card.vue'\n"
            "export default { components: { Card } }\n"
            "</script>\n"
            "<template>\n  <p>Values copied from 'Card' settings</p>\n</template>\n"
        )
        expected = text.replace("'./Card.vue'", "'./card.vue'")

        assert rewrite_text(text, {"Card": "card"}) == expected

    def test_commented_import_untouched(self):
        text = "// import Button from './Button.vue'\nimport Card from './Card.vue'"
        expected = "// import Button from './Button.vue'\nimport Card from './card.vue'"

        assert rewrite_text(text, {"Button": "button", "Card": "card"}) == expected

    def test_rewrite_is_idempotent(self):
        renames = {"Dialog": "dialog", "DialogContent": "dialog-content"}
        text = "import { DialogContent } from '@/components/ui/Dialog/DialogContent.vue'"
        once = rewrite_text(text, renames)

        assert rewrite_text(once, renames) == once


class TestRewriteFile:

    def test_writes_only_when_changed(self, tmp_path):
        path = tmp_path / "test.vue"
        path.write_text("import Button from './Button.vue'\n", encoding="utf-8")
        renames = RenameMap.from_dict({"Button": "button"})

        assert rewrite_file(path, renames) is True
        assert path.read_text(encoding="utf-8") == "import Button from './button.vue'\n"
        assert rewrite_file(path, renames) is False

    def test_template_only_file_left_byte_identical(self, tmp_path):
        path = tmp_path / "Page.vue"
        original = b"<template>\r\n  <Button>Save</Button>\r\n</template>\r\n"
        path.write_bytes(original)

        assert rewrite_file(path, {"Button": "button"}) is False
        assert path.read_bytes() == original

    def test_preserves_crlf_line_endings(self, tmp_path):
        path = tmp_path / "index.ts"
        path.write_bytes(b"import Card from './Card.vue'\r\nexport { Card }\r\n")

        assert rewrite_file(path, {"Card": "card"}) is True
        assert path.read_bytes() == b"import Card from './card.vue'\r\nexport { Card }\r\n"

    def test_non_utf8_bytes_round_trip(self, tmp_path):
        path = tmp_path / "legacy.ts"
        path.write_bytes(b"// caf\xe9 cr\xe8me\nimport Card from '../a/Card.vue'\n")

        assert rewrite_file(path, {"Card": "card"}) is True
        assert path.read_bytes() == b"// caf\xe9 cr\xe8me\nimport Card from '../a/card.vue'\n"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileRewriteError):
            rewrite_file(tmp_path / "Missing.vue", {"Missing": "missing"})
