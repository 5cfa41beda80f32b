import pytest

SAMPLE_TEI = """<?xml version="1.0" encoding="UTF-8"?>
<TEI xmlns="http://www.tei-c.org/ns/1.0">
  <teiHeader>
    <fileDesc>
      <titleStmt>
        <title level="a" type="main" coords="1,72.0,700.5,400.0,20.0">Open Science</title>
      </titleStmt>
      <publicationStmt>
        <publisher/>
        <date type="published" when="2021-03-04">4 March 2021</date>
      </publicationStmt>
      <sourceDesc>
        <biblStruct>
          <analytic>
            <author role="corresp">
              <persName coords="1,10,10,5,5;2,20,20,5,5"><forename type="first">Ada</forename><surname>Lovelace</surname></persName>
              <affiliation key="aff0" coords="1,30,40,100,8"><orgName>Analytical Society</orgName></affiliation>
            </author>
            <author>
              <persName><forename type="first">Charles</forename><surname>Babbage</surname></persName>
            </author>
          </analytic>
          <idno type="DOI">10.1000/xyz123</idno>
        </biblStruct>
      </sourceDesc>
    </fileDesc>
    <profileDesc>
      <textClass>
        <keywords>
          <term coords="1,50,600,40,10">open data</term>
          <term>reproducibility</term>
        </keywords>
      </textClass>
      <abstract>
        <div type="abstract"><p><s coords="1,60,500,300,10;1,60,512,280,10">We share everything.</s></p></div>
      </abstract>
    </profileDesc>
  </teiHeader>
  <text>
    <body>
      <div>
        <head n="1" coords="1,72,400,120,12">Introduction</head>
        <p>Body text.</p>
        <formula xml:id="formula_0" coords="2,100,300,200,30">E = mc^2</formula>
      </div>
      <div>
        <head coords="abc,1,2,3,4">Methods</head>
      </div>
      <figure xml:id="fig_0" type="figure" coords="2,50,100,250,150"><head>Figure 1</head><figDesc>A chart.</figDesc></figure>
      <figure type="table" coords="3,50,100,250,150;bad;3,50,260,250,40"><figDesc>No head here.</figDesc></figure>
    </body>
    <back>
      <div type="references">
        <listBibl>
          <biblStruct xml:id="b0" coords="4,40,80,240,20">
            <analytic>
              <title level="a" type="main">Notes on the engine</title>
              <author><persName><forename>A</forename><surname>Lovelace</surname></persName></author>
            </analytic>
            <monogr><imprint><date type="published" when="1843"/></imprint></monogr>
          </biblStruct>
          <biblStruct xml:id="b1"><monogr><title>No coords</title></monogr></biblStruct>
        </listBibl>
      </div>
    </back>
  </text>
</TEI>
"""

# (id, type, page, (x, y, w, h), text) for SAMPLE_TEI, in output order
SAMPLE_EXPECTED = [
    ("annotation-0", "title", 1, (72.0, 700.5, 400.0, 20.0), "Open Science"),
    ("annotation-1", "author", 1, (10, 10, 5, 5), "Ada Lovelace"),
    ("annotation-2", "author", 2, (20, 20, 5, 5), "Ada Lovelace"),
    ("annotation-3", "abstract", 1, (60, 500, 300, 10), "We share everything."),
    ("annotation-4", "abstract", 1, (60, 512, 280, 10), "We share everything."),
    ("annotation-5", "section", 1, (72, 400, 120, 12), "Introduction"),
    ("annotation-6", "reference", 4, (40, 80, 240, 20), "A Lovelace. Notes on the engine (1843)"),
    ("annotation-7", "figure", 2, (50, 100, 250, 150), "Figure 1"),
    ("annotation-8", "table", 3, (50, 100, 250, 150), "Table"),
    ("annotation-9", "table", 3, (50, 260, 250, 40), "Table"),
    ("annotation-10", "keyword", 1, (50, 600, 40, 10), "open data"),
    ("annotation-11", "affiliation", 1, (30, 40, 100, 8), "Analytical Society"),
    ("annotation-12", "formula", 2, (100, 300, 200, 30), "E = mc^2"),
]


def make_tei(header: str = "", body: str = "", back: str = "") -> str:
    """Minimal TEI without namespace around the given fragments."""
    return (
        "<TEI><teiHeader>" + header + "</teiHeader>"
        "<text><body>" + body + "</body><back>" + back + "</back></text></TEI>"
    )


@pytest.fixture
def sample_tei() -> str:
    return SAMPLE_TEI
