"""Shared fixtures for gedcheck tests."""

import os
import tempfile

import pytest

from gedcheck.core.event import IndividualEvent
from gedcheck.core.family import Family
from gedcheck.core.gedcom import Gedcom
from gedcheck.core.header import (
    CharacterSet,
    GedcomVersion,
    Header,
    SourceSystem,
    SupportedVersion,
    Trailer,
)
from gedcheck.core.individual import Individual
from gedcheck.core.name import PersonalName
from gedcheck.core.place import Place
from gedcheck.core.submitter import Submission, Submitter
from gedcheck.validation import GedcomValidator


SAMPLE_GEDCOM = """0 HEAD
1 SOUR TEST
2 VERS 1.0
2 NAME Test Program
1 SUBM @U1@
1 SUBN @SUBN1@
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @U1@ SUBM
1 NAME Test Submitter
1 LANG English
0 @SUBN1@ SUBN
1 SUBM @U1@
0 @N1@ NOTE Shared note about the Doe family
1 CONT second line
0 @M1@ OBJE
1 FILE photo.jpg
2 FORM jpg
3 TYPE photo
2 TITL Wedding photo
0 @I1@ INDI
1 NAME John /Doe/
2 GIVN John
2 SURN Doe
1 SEX M
1 BIRT
2 DATE 1 JAN 1920
2 PLAC Boston, MA, USA
2 SOUR @S1@
3 PAGE p. 12
1 DEAT Y
1 OCCU Carpenter
1 FAMS @F1@
1 NOTE @N1@
1 OBJE @M1@
1 _UID 1234
0 @I2@ INDI
1 NAME Jane /Smith/
1 SEX F
1 FAMS @F1@
0 @I3@ INDI
1 NAME Alice /Doe/
1 SEX F
1 FAMC @F1@
2 PEDI birth
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
1 CHIL @I3@
1 MARR
2 DATE 15 JUN 1945
0 @S1@ SOUR
1 TITL Parish records
1 AUTH St. Mary's Church
1 REPO @R1@
2 CALN 123
0 @R1@ REPO
1 NAME County Archive
0 TRLR
"""


def build_minimal_gedcom() -> Gedcom:
    """Build the smallest graph that validates without errors once repaired."""
    submitter = Submitter(xref='@SUBM1@', name='Test Submitter')
    header = Header(
        source_system=SourceSystem(system_id='TEST'),
        submitter=submitter.xref,
        gedcom_version=GedcomVersion(version_number=SupportedVersion.V5_5_1,
                                     gedcom_form='LINEAGE-LINKED'),
        character_set=CharacterSet(character_set_name='UTF-8'),
    )
    return Gedcom(
        header=header,
        submission=Submission(xref='@SUBN1@'),
        trailer=Trailer(),
        submitters={submitter.xref: submitter},
    )


def make_individual(xref: str, basic_name: str, sex: str = 'U') -> Individual:
    return Individual(
        xref=xref,
        names=[PersonalName(basic=basic_name)],
        sex=sex,
        events=[IndividualEvent(type='BIRT', date='1 JAN 1950',
                                place=Place(place_name='Boston, MA, USA'))],
    )


@pytest.fixture
def minimal_gedcom():
    """A minimal graph whose list fields have not been created yet."""
    return build_minimal_gedcom()


@pytest.fixture
def family_gedcom():
    """A minimal graph with a couple and their child."""
    gedcom = build_minimal_gedcom()
    for individual in (make_individual('@I1@', 'John /Doe/', 'M'),
                       make_individual('@I2@', 'Jane /Smith/', 'F'),
                       make_individual('@I3@', 'Alice /Doe/', 'F')):
        gedcom.individuals[individual.xref] = individual
    gedcom.families['@F1@'] = Family(xref='@F1@', husband='@I1@', wife='@I2@',
                                     children=['@I3@'])
    return gedcom


@pytest.fixture
def clean_gedcom(family_gedcom):
    """The family graph after one repair pass, so that it validates clean."""
    GedcomValidator(family_gedcom).validate()
    return family_gedcom


@pytest.fixture
def sample_gedcom_file():
    """Create a temporary GEDCOM file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.ged', delete=False,
                                     encoding='utf-8') as f:
        f.write(SAMPLE_GEDCOM)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


def descriptions(validator, severity=None):
    """Descriptions of the findings of the last pass."""
    return [f.description for f in validator.get_findings(severity)]
