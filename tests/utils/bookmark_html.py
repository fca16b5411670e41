NETSCAPE_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><A HREF="https://github.com/foo" ADD_DATE="1700000000">Foo Repo</A>
    <DT><H3 ADD_DATE="1700000000">Cooking</H3>
    <DL><p>
        <DT><A HREF="https://allrecipes.com/r1" ADD_DATE="1700000000">Pasta</A>
    </DL><p>
</DL><p>
"""

NESTED_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><A HREF="https://example.org/root">Root link</A>
    <DT><H3>Work</H3>
    <DL><p>
        <DT><A HREF="https://example.org/work">Work link</A>
        <DT><H3>Dev</H3>
        <DL><p>
            <DT><A HREF="https://example.org/dev">Dev link</A>
        </DL><p>
        <DT><A HREF="https://example.org/after-dev">After dev</A>
    </DL><p>
    <DT><A HREF="https://example.org/after-work">After work</A>
</DL><p>
"""

# Explicitly closed <dt>, folder list as the next sibling.
SIBLING_EXPORT = """<html><body>
<dl>
  <dt><a href="https://example.org/root">Root link</a></dt>
  <dt><h3>Work</h3></dt>
  <dl>
    <dt><a href="https://example.org/work">Work link</a></dt>
    <dt><h3>Dev</h3></dt>
    <dl>
      <dt><a href="https://example.org/dev">Dev link</a></dt>
    </dl>
  </dl>
</dl>
</body></html>
"""
