from typing import get_args

from dirtree.types import Attribute, FileType, NodeCallback


def test_attribute_stat_fields():
    assert Attribute.SIZE.stat_field == "st_size"
    assert Attribute("mtime") is Attribute.MTIME


def test_file_type_values():
    assert FileType.FILE == "file"
    assert FileType.DIRECTORY.value == "directory"


def test_node_callback_takes_node_and_path():
    parameters, return_type = get_args(NodeCallback)
    assert parameters[0].__forward_arg__ == "TreeNode"
    assert parameters[1] is str
    assert return_type is type(None)
