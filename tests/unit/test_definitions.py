import pytest
from pydantic import ValidationError

from lodestone.models import PagedEntryDefinition, RegistryMeta, SelectorDefinition, decode_leaf


def test_feed_keys_decode_with_defaults():
    definition = SelectorDefinition.model_validate({'Selector': '.frame__chara__name'})

    assert definition.path == '.frame__chara__name'
    assert definition.attribute is None
    assert definition.value_pattern is None
    assert definition.index == 0


def test_lowercase_feed_keys_are_accepted():
    definition = SelectorDefinition.model_validate(
        {'selector': 'a.link', 'attribute': 'href', 'regex': '/id/(\\d+)/', 'index': 2}
    )

    assert definition.attribute == 'href'
    assert definition.value_pattern == '/id/(\\d+)/'
    assert definition.index == 2


def test_empty_attribute_and_regex_mean_unset():
    definition = SelectorDefinition.model_validate({'Selector': 'p', 'Attribute': '', 'Regex': ' '})

    assert definition.attribute is None
    assert definition.value_pattern is None


@pytest.mark.parametrize(
    'leaf',
    [
        {},
        {'Selector': ''},
        {'Selector': 'p', 'Index': -1},
        {'Selector': 'p', 'Regex': 'no group here'},
        {'Selector': 'p', 'Regex': '(unclosed'},
    ],
)
def test_malformed_leaves_are_rejected(leaf):
    with pytest.raises(ValidationError):
        SelectorDefinition.model_validate(leaf)


def test_dotnet_named_groups_are_rewritten():
    definition = SelectorDefinition.model_validate({'Selector': 'p', 'Regex': 'Page (?<Current>\\d+)'})

    assert definition.value_pattern == 'Page (?P<Current>\\d+)'


def test_lookbehind_is_left_alone():
    definition = SelectorDefinition.model_validate({'Selector': 'p', 'Regex': '(?<=Lv\\. )(\\d+)'})

    assert definition.value_pattern == '(?<=Lv\\. )(\\d+)'


def test_definitions_are_immutable():
    definition = SelectorDefinition(path='p')

    with pytest.raises(ValidationError):
        definition.path = 'div'


def test_leaf_with_entries_decodes_as_paged():
    leaf = decode_leaf(
        {
            'Selector': 'li.entry',
            'Entries': {
                'NAME': {'Selector': '.entry__name'},
                'ID': {'Selector': 'a', 'Attribute': 'href', 'Regex': '/character/(\\d+)/'},
            },
        }
    )

    assert isinstance(leaf, PagedEntryDefinition)
    assert leaf.entry_container_path == 'li.entry'
    assert set(leaf.entries) == {'NAME', 'ID'}
    assert leaf.entries['ID'].attribute == 'href'


def test_plain_leaf_decodes_as_selector_definition():
    leaf = decode_leaf({'Selector': 'p'})

    assert type(leaf) is SelectorDefinition


def test_malformed_entry_fails_the_paged_leaf():
    with pytest.raises(ValidationError):
        decode_leaf({'Selector': 'li.entry', 'Entries': {'NAME': {'Attribute': 'title'}}})


def test_meta_block_accepts_both_spellings():
    meta = RegistryMeta.model_validate({'version': 'abc123', 'userAgentMobile': 'Mobile UA'})

    assert meta.version == 'abc123'
    assert meta.user_agent_mobile == 'Mobile UA'
    assert meta.user_agent_desktop is None
