# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for XmlElement, ElementStore and XmlDocument."""

import pytest

from genro_xmlresponse import (
    ElementStore,
    FrozenDocumentError,
    XmlDocument,
    XmlElement,
)


class TestXmlElement:
    """Tests for XmlElement."""

    def test_create_branch_by_default(self):
        """Test element without value gets an empty children store."""
        node = XmlElement('data_0', 'data')
        assert node.is_branch is True
        assert node.is_leaf is False
        assert isinstance(node.value, ElementStore)
        assert len(node.children) == 0
        assert node.text is None

    def test_create_leaf(self):
        """Test element with text is a leaf."""
        node = XmlElement('name_0', 'name', 'pic1')
        assert node.is_leaf is True
        assert node.text == 'pic1'
        assert node.tag == 'name'
        assert node.label == 'name_0'

    def test_children_of_leaf_raises(self):
        """Test children access on a leaf raises."""
        node = XmlElement('name_0', 'name', 'pic1')
        with pytest.raises(ValueError, match="is a leaf"):
            _ = node.children

    def test_set_text_on_empty_branch(self):
        """Test an empty branch becomes a leaf."""
        node = XmlElement('status_0', 'status')
        node.set_text('2000')
        assert node.is_leaf
        assert node.text == '2000'

    def test_set_text_with_children_raises(self):
        """Test text is never mixed with children."""
        node = XmlElement('data_0', 'data')
        node.append('item', 'a')
        with pytest.raises(ValueError, match="has children"):
            node.set_text('b')

    def test_repr(self):
        """Test string representation."""
        node = XmlElement('name_0', 'name', 'pic1')
        repr_str = repr(node)
        assert 'name_0' in repr_str
        assert 'pic1' in repr_str


class TestElementStore:
    """Tests for ElementStore."""

    def test_auto_label_increments(self):
        """Test repeated tags get tag_N labels."""
        store = ElementStore()
        store.child('item', 'a')
        store.child('item', 'b')
        store.child('name', 'c')
        assert store.keys() == ['item_0', 'item_1', 'name_0']
        assert store.tags() == ['item', 'item', 'name']

    def test_auto_label_unique_with_suffixed_tags(self):
        """Test tags that look like labels do not collide with generated ones."""
        store = ElementStore()
        store.child('item_0', 'literal')
        store.child('item', 'a')
        store.child('item', 'b')
        assert store.keys() == ['item_0_0', 'item_0', 'item_1']
        assert [n.text for n in store] == ['literal', 'a', 'b']

    def test_order_preserved(self):
        """Test children iterate in insertion order."""
        store = ElementStore()
        for tag in ('status', 'message', 'data'):
            store.child(tag)
        assert [n.tag for n in store] == ['status', 'message', 'data']
        assert len(store) == 3

    def test_path_access(self):
        """Test dotted path access through branches."""
        store = ElementStore()
        data = store.child('data')
        item = data.append('item')
        item.append('name', 'pic1')
        assert store['data_0.item_0.name_0'] == 'pic1'
        assert 'data_0.item_0' in store
        assert 'data_0.item_9' not in store

    def test_positional_access(self):
        """Test #N and #-N segments."""
        store = ElementStore()
        store.child('a', '1')
        store.child('b', '2')
        assert store['#0'] == '1'
        assert store['#-1'] == '2'
        with pytest.raises(KeyError):
            store['#5']

    def test_leaf_in_path_raises(self):
        """Test traversing through a leaf raises KeyError."""
        store = ElementStore()
        store.child('name', 'pic1')
        with pytest.raises(KeyError, match="is a leaf"):
            store.get_node('name_0.other')

    def test_get_item_default(self):
        """Test get_item returns default for missing paths."""
        store = ElementStore()
        assert store.get_item('missing', 'x') == 'x'

    def test_walk(self):
        """Test depth-first walk yields paths in document order."""
        store = ElementStore()
        data = store.child('data')
        data.append('item', 'a')
        store.child('status', '1')
        paths = [p for p, _ in store.walk()]
        assert paths == ['data_0', 'data_0.item_0', 'status_0']

    def test_walk_callback(self):
        """Test walk with a callback."""
        store = ElementStore()
        store.child('data').append('item', 'a')
        tags = []
        assert store.walk(lambda n: tags.append(n.tag)) is None
        assert tags == ['data', 'item']

    def test_element_path(self):
        """Test element path excludes the top-level element."""
        store = ElementStore()
        root = store.child('response')
        name = root.append('data').append('name', 'x')
        assert root.path == ''
        assert name.path == 'data_0.name_0'


class TestXmlDocument:
    """Tests for XmlDocument rendering and freezing."""

    def test_empty_document(self):
        """Test an empty root renders self-closed."""
        doc = XmlDocument()
        assert doc.to_xml() == '<?xml version="1.0" encoding="UTF-8"?>\n<response/>\n'

    def test_custom_declaration(self):
        """Test version, encoding and root tag."""
        doc = XmlDocument(root_tag='photos', version='1.1', encoding='ISO-8859-1')
        assert doc.declaration == '<?xml version="1.1" encoding="ISO-8859-1"?>'
        assert doc.to_xml(declaration=False) == '<photos/>\n'

    def test_nested_rendering(self):
        """Test leaves, empty text and empty branches."""
        doc = XmlDocument()
        doc.root.append('status', '2000')
        doc.root.append('note', '')
        doc.root.append('data')
        assert doc.to_xml(declaration=False) == (
            '<response><status>2000</status><note></note><data/></response>\n'
        )

    def test_text_is_escaped(self):
        """Test markup characters in text are escaped."""
        doc = XmlDocument()
        doc.root.append('q', 'a<b & c>d')
        assert '<q>a&lt;b &amp; c&gt;d</q>' in doc.to_xml()

    def test_to_bytes_uses_encoding(self):
        """Test unencodable characters become character references."""
        doc = XmlDocument(encoding='ISO-8859-1')
        doc.root.append('price', '5 €')
        content = doc.to_bytes()
        assert content.startswith(b'<?xml version="1.0" encoding="ISO-8859-1"?>')
        assert b'<price>5 &#8364;</price>' in content

    def test_path_access(self):
        """Test path access below the root."""
        doc = XmlDocument()
        doc.root.append('data').append('name', 'pic1')
        assert doc['data_0.name_0'] == 'pic1'

    def test_count(self):
        """Test element count includes the root."""
        doc = XmlDocument()
        doc.root.append('data').append('name', 'pic1')
        assert doc.count() == 3

    def test_freeze_blocks_children(self):
        """Test a frozen document rejects new elements."""
        doc = XmlDocument()
        data = doc.root.append('data')
        doc.freeze()
        assert doc.frozen is True
        with pytest.raises(FrozenDocumentError):
            doc.root.append('other')
        with pytest.raises(FrozenDocumentError):
            data.append('item')

    def test_freeze_blocks_text(self):
        """Test a frozen document rejects text changes."""
        doc = XmlDocument()
        name = doc.root.append('name', 'pic1')
        doc.freeze()
        with pytest.raises(FrozenDocumentError):
            name.set_text('pic2')
        with pytest.raises(FrozenDocumentError):
            doc.root.set_text('x')
