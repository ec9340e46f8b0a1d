"""
Static window content as lists of (style, payload) blocks.

Styles: title, heading, body, dim, accent, bullet, link, bar, spacer.
For ``bar`` the payload is (label, level, color); for everything else text.
"""
from .portfolio import EDUCATION, EXPERIENCE, EXPERTISE, PERSONAL, PROJECTS, SKILLS
from .registry import WindowId

SPACER = ("spacer", "")


def about_blocks():
    blocks = [("title", PERSONAL["name"]), ("accent", PERSONAL["title"]), ("dim", PERSONAL["location"]), SPACER]
    for para in PERSONAL["bio"]:
        blocks += [("body", para), SPACER]
    blocks.append(("heading", "   ".join("%s %s" % stat for stat in PERSONAL["stats"])))
    blocks.append(SPACER)
    links = PERSONAL["links"]
    blocks += [("link", links["github"]), ("link", links["linkedin"]), ("link", "mailto:" + links["email"])]
    return blocks


def projects_blocks():
    blocks = []
    for p in PROJECTS:
        blocks += [("heading", "%s  [%s]" % (p["name"], p["tag"])), ("body", p["description"]),
                   ("dim", "Tech: " + ", ".join(p["tech"]))]
        if p.get("link"):
            blocks.append(("link", p["link"]))
        blocks.append(SPACER)
    return blocks


def skills_blocks():
    blocks = [("accent", "$ ./skills.sh --verbose"), SPACER]
    blocks += [("bar", skill) for skill in SKILLS]
    blocks += [SPACER, ("accent", "$ cat expertise.txt"), SPACER]
    blocks += [("bullet", area) for area in EXPERTISE]
    return blocks


def experience_blocks():
    blocks = []
    for e in EXPERIENCE:
        blocks += [("heading", e["role"]), ("accent", e["company"]),
                   ("dim", "%s  |  %s" % (e["date"], e["location"]) if e.get("location") else e["date"]),
                   ("body", e["summary"])]
        blocks += [("bullet", b) for b in e["bullets"]]
        blocks.append(SPACER)
    return blocks


def education_blocks():
    blocks = []
    for ed in EDUCATION:
        blocks += [("heading", ed["degree"]), ("accent", ed["school"]), ("dim", ed["date"]),
                   ("body", ed["details"]), SPACER]
    return blocks


def contact_blocks():
    links = PERSONAL["links"]
    blocks = [("body", "Let's connect! I'm currently looking for new grad software engineering opportunities."),
              SPACER]
    cards = [
        ("Email", links["email"]),
        ("University Email", links["email_alt"]),
        ("GitHub", links["github"].replace("https://", "")),
        ("LinkedIn", links["linkedin"].replace("https://www.", "")),
        ("Website", links["website"].replace("https://", "")),
    ]
    for label, value in cards:
        blocks += [("dim", label), ("link", value), SPACER]
    return blocks


def resume_blocks():
    links = PERSONAL["links"]
    blocks = [("title", PERSONAL["name"]),
              ("dim", "%s  |  %s  |  GitHub  |  LinkedIn" % (PERSONAL["location"], links["email"])),
              SPACER, ("heading", "EDUCATION")]
    for ed in EDUCATION:
        blocks += [("accent", "%s - %s" % (ed["degree"], ed["school"])), ("dim", ed["date"])]
    blocks += [SPACER, ("heading", "EXPERIENCE")]
    for e in EXPERIENCE:
        blocks += [("accent", "%s - %s" % (e["role"], e["company"])), ("dim", e["date"])]
        blocks += [("bullet", b) for b in e["bullets"]]
    blocks += [SPACER, ("heading", "PROJECTS")]
    for p in PROJECTS[:3]:
        blocks += [("accent", p["name"]), ("dim", ", ".join(p["tech"]))]
    blocks += [SPACER, ("heading", "SKILLS"), ("body", ", ".join(name for name, _, _ in SKILLS))]
    return blocks


BLOCKS = {
    WindowId.ABOUT: about_blocks,
    WindowId.PROJECTS: projects_blocks,
    WindowId.SKILLS: skills_blocks,
    WindowId.EXPERIENCE: experience_blocks,
    WindowId.EDUCATION: education_blocks,
    WindowId.CONTACT: contact_blocks,
    WindowId.RESUME: resume_blocks,
}
