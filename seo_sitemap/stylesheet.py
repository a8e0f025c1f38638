"""Static XSL used by browsers to render generated sitemaps as HTML tables."""

SITEMAP_XSL = """<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet version="1.0"
  xmlns:xsl="http://www.w3.org/1999/XSL/Transform"
  xmlns:sitemap="http://www.sitemaps.org/schemas/sitemap/0.9"
  xmlns:xhtml="http://www.w3.org/1999/xhtml"
  exclude-result-prefixes="sitemap xhtml">
  <xsl:output method="html" version="1.0" encoding="UTF-8" indent="yes"/>
  <xsl:template match="/">
    <html>
      <head>
        <title>XML Sitemap</title>
        <meta name="robots" content="noindex,follow"/>
        <style type="text/css">
          body { font-family: sans-serif; font-size: 14px; color: #333; margin: 24px; }
          table { border-collapse: collapse; width: 100%; }
          th, td { text-align: left; padding: 6px 10px; border-bottom: 1px solid #ddd; }
          th { background: #f4f4f4; }
          td.alternates { font-size: 12px; color: #666; }
          a { color: #1a5fb4; text-decoration: none; }
        </style>
      </head>
      <body>
        <xsl:choose>
          <xsl:when test="sitemap:sitemapindex">
            <h1>Sitemap Index</h1>
            <p><xsl:value-of select="count(sitemap:sitemapindex/sitemap:sitemap)"/> sitemaps</p>
            <table>
              <tr><th>Sitemap</th><th>Last modified</th></tr>
              <xsl:for-each select="sitemap:sitemapindex/sitemap:sitemap">
                <tr>
                  <td><a href="{sitemap:loc}"><xsl:value-of select="sitemap:loc"/></a></td>
                  <td><xsl:value-of select="sitemap:lastmod"/></td>
                </tr>
              </xsl:for-each>
            </table>
          </xsl:when>
          <xsl:otherwise>
            <h1>XML Sitemap</h1>
            <p><xsl:value-of select="count(sitemap:urlset/sitemap:url)"/> URLs</p>
            <table>
              <tr><th>URL</th><th>Last modified</th><th>Change frequency</th><th>Priority</th><th>Alternates</th></tr>
              <xsl:for-each select="sitemap:urlset/sitemap:url">
                <tr>
                  <td><a href="{sitemap:loc}"><xsl:value-of select="sitemap:loc"/></a></td>
                  <td><xsl:value-of select="sitemap:lastmod"/></td>
                  <td><xsl:value-of select="sitemap:changefreq"/></td>
                  <td><xsl:value-of select="sitemap:priority"/></td>
                  <td class="alternates">
                    <xsl:for-each select="xhtml:link">
                      <xsl:value-of select="@hreflang"/>
                      <xsl:if test="position() != last()"><xsl:text>, </xsl:text></xsl:if>
                    </xsl:for-each>
                  </td>
                </tr>
              </xsl:for-each>
            </table>
          </xsl:otherwise>
        </xsl:choose>
      </body>
    </html>
  </xsl:template>
</xsl:stylesheet>
"""
