"""
Suggested Picklists
===================

Suggested (not exhaustive) values for the controlled-vocabulary elements
of each dialect, and the best-practice rule set that ``Validator`` runs
for a dialect when asked to.

Picklists from configuration replace the built-in list for the same
element; everything else falls back to the defaults below.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
import logging

from pbcore_core.validation.schema import Dialect

logger = logging.getLogger(__name__)


PBCORE_PICKLISTS: Dict[str, List[str]] = {
    'titleType': [
        'Album', 'Collection', 'Episode', 'Episode Number', 'Program',
        'Segment', 'Series', 'Series Number', 'Story', 'Subseries',
        'Alternative', 'Abbreviated', 'Uniform', 'Translated', 'Clip',
        'Element', 'Package', 'Project', 'Web Page',
    ],
    'descriptionType': [
        'Abstract', 'Collection', 'Episode', 'Program', 'Segment',
        'Series', 'Story', 'Summary', 'Table of Contents', 'Transcript',
    ],
    'creatorRole': [
        'Actor', 'Anchor', 'Animator', 'Announcer', 'Artist', 'Arranger',
        'Author', 'Cinematographer', 'Composer', 'Creator', 'Director',
        'Editor', 'Executive Producer', 'Host', 'Illustrator',
        'Interviewee', 'Interviewer', 'Moderator', 'Musician', 'Narrator',
        'Performer', 'Photographer', 'Producer', 'Reporter', 'Writer',
    ],
    'contributorRole': [
        'Actor', 'Anchor', 'Announcer', 'Art Director', 'Audio Engineer',
        'Camera Operator', 'Cast', 'Choreographer', 'Commentator',
        'Composer', 'Conductor', 'Crew', 'Director', 'Editor', 'Engineer',
        'Graphic Designer', 'Guest', 'Host', 'Interviewee', 'Interviewer',
        'Lighting Director', 'Musician', 'Narrator', 'Panelist',
        'Performer', 'Producer', 'Production Assistant', 'Reporter',
        'Technical Director', 'Translator', 'Voice Over', 'Writer',
    ],
    'publisherRole': [
        'Copyright Holder', 'Distributor', 'Presenter', 'Publisher',
    ],
    'coverageType': [
        'Spatial', 'Temporal',
    ],
    'formatMediaType': [
        'Animation', 'Artifact', 'Collection', 'Dataset', 'Interactive Resource',
        'Moving Image', 'Physical Object', 'Presentation', 'Service',
        'Software', 'Sound', 'Static Image', 'Text',
    ],
    'formatGenerations': [
        'Answer print', 'Clip reel', 'Copy', 'Dub', 'Duplicate', 'Fine cut',
        'Kinescope', 'Master', 'Mezzanine', 'Original', 'Preservation master',
        'Proxy', 'Rough cut', 'Sub-master', 'Transmission copy', 'Work print',
    ],
    'essenceTrackType': [
        'Audio', 'Caption', 'Closed Caption', 'Metadata', 'Sprite',
        'Subtitle', 'Text', 'Timecode', 'Video',
    ],
}

# DCMI Type Vocabulary
DC_PICKLISTS: Dict[str, List[str]] = {
    'type': [
        'Collection', 'Dataset', 'Event', 'Image', 'InteractiveResource',
        'MovingImage', 'PhysicalObject', 'Service', 'Software', 'Sound',
        'StillImage', 'Text',
    ],
}

PBCORE_NAME_ELEMENTS = ['creator', 'contributor', 'publisher']
PBCORE_LIST_ELEMENTS = ['subject', 'genre', 'audienceLevel', 'language']

DC_NAME_ELEMENTS = ['creator', 'contributor', 'publisher']
DC_LIST_ELEMENTS = ['subject', 'language']


@dataclass
class RuleSet:
    """
    The heuristic checks to run for one dialect.

    Attributes:
        picklists: Element name -> suggested values
        name_elements: Elements whose content may be a person's name
        list_elements: Elements whose content must not be a delimited list
        check_formats: Whether to look for instantiations with both formats
    """
    picklists: Dict[str, List[str]] = field(default_factory=dict)
    name_elements: List[str] = field(default_factory=list)
    list_elements: List[str] = field(default_factory=list)
    check_formats: bool = False


def default_picklists(dialect: Dialect) -> Dict[str, List[str]]:
    """Return a copy of the built-in picklists for a dialect."""
    source = PBCORE_PICKLISTS if dialect.is_pbcore else DC_PICKLISTS
    return {element: list(values) for element, values in source.items()}


def best_practice_rules(dialect: Dialect, rule_config=None) -> RuleSet:
    """
    Build the rule set for a dialect.

    Args:
        dialect: Dialect being validated
        rule_config: Optional RuleConfig whose values override the defaults

    Returns:
        RuleSet for the dialect
    """
    if dialect.is_pbcore:
        rules = RuleSet(
            picklists=default_picklists(dialect),
            name_elements=list(PBCORE_NAME_ELEMENTS),
            list_elements=list(PBCORE_LIST_ELEMENTS),
            check_formats=True,
        )
    else:
        rules = RuleSet(
            picklists=default_picklists(dialect),
            name_elements=list(DC_NAME_ELEMENTS),
            list_elements=list(DC_LIST_ELEMENTS),
            check_formats=False,
        )

    if rule_config is None:
        return rules

    overrides: Mapping[str, List[str]] = rule_config.picklists or {}
    for element, values in overrides.items():
        rules.picklists[element] = list(values)
    if rule_config.name_elements is not None:
        rules.name_elements = list(rule_config.name_elements)
    if rule_config.list_elements is not None:
        rules.list_elements = list(rule_config.list_elements)
    if not rule_config.check_formats:
        rules.check_formats = False

    logger.debug(f"Best-practice rules for {dialect.version}: "
                 f"{len(rules.picklists)} picklist(s), "
                 f"{len(rules.name_elements)} name element(s), "
                 f"{len(rules.list_elements)} list element(s)")
    return rules


def picklist_for(element: str, dialect: Dialect,
                 overrides: Optional[Mapping[str, List[str]]] = None) -> List[str]:
    """Return the suggested values for one element, or an empty list."""
    if overrides and element in overrides:
        return list(overrides[element])
    return default_picklists(dialect).get(element, [])
