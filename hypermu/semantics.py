# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
HTML and SVG semantics data.
'''

html_void_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'embed',
  'hr',
  'img',
  'input',
  'keygen',
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})

# SVG shape and leaf elements that are conventionally written self-closing.
svg_void_tags = frozenset({
  'circle',
  'ellipse',
  'line',
  'path',
  'polygon',
  'polyline',
  'rect',
  'stop',
  'use',
})

void_tags = html_void_tags | svg_void_tags


# Attributes whose presence alone is meaningful. Values must be `bool`:
# `True` renders the bare attribute name and `False` omits the attribute.
boolean_attrs = frozenset({
  'allowfullscreen',
  'async',
  'autofocus',
  'autoplay',
  'checked',
  'controls',
  'default',
  'defer',
  'disabled',
  'formnovalidate',
  'hidden',
  'inert',
  'ismap',
  'itemscope',
  'loop',
  'multiple',
  'muted',
  'nomodule',
  'novalidate',
  'open',
  'playsinline',
  'readonly',
  'required',
  'reversed',
  'selected',
})


# All camelCase attribute names from HTML 4, HTML 5, SVG 1.1, SVG Tiny 1.2, and SVG 2.
svg_camel_attrs = frozenset({
  'attributeName', 'attributeType', 'baseFrequency', 'baseProfile', 'calcMode', 'clipPathUnits',
  'contentScriptType', 'contentStyleType', 'defaultAction', 'diffuseConstant', 'edgeMode',
  'externalResourcesRequired', 'filterRes', 'filterUnits', 'focusHighlight', 'glyphRef', 'gradientTransform',
  'gradientUnits', 'hatchContentUnits', 'hatchUnits', 'initialVisibility', 'kernelMatrix', 'kernelUnitLength',
  'keyPoints', 'keySplines', 'keyTimes', 'lengthAdjust', 'limitingConeAngle', 'markerHeight', 'markerUnits',
  'markerWidth', 'maskContentUnits', 'maskUnits', 'mediaCharacterEncoding', 'mediaContentEncodings', 'mediaSize',
  'mediaTime', 'numOctaves', 'pathLength', 'patternContentUnits', 'patternTransform', 'patternUnits',
  'playbackOrder', 'pointsAtX', 'pointsAtY', 'pointsAtZ', 'preserveAlpha', 'preserveAspectRatio',
  'primitiveUnits', 'refX', 'refY', 'repeatCount', 'repeatDur', 'requiredExtensions', 'requiredFeatures',
  'requiredFonts', 'requiredFormats', 'snapshotTime', 'specularConstant', 'specularExponent', 'spreadMethod',
  'startOffset', 'stdDeviation', 'stitchTiles', 'surfaceScale', 'syncBehavior', 'syncBehaviorDefault',
  'syncMaster', 'syncTolerance', 'syncToleranceDefault', 'systemLanguage', 'tableValues', 'targetX', 'targetY',
  'textLength', 'timelineBegin', 'transformBehavior', 'viewBox', 'viewTarget', 'xChannelSelector',
  'yChannelSelector', 'zoomAndPan',
})

# Lowercased name -> canonical camelCase name; lets both "pathLength" and "pathlength" normalize to "pathLength".
svg_camel_attrs_by_lower = { a.lower(): a for a in svg_camel_attrs }

# SVG attribute names containing digits that must not be split at the letter-digit boundary.
svg_digit_attrs = frozenset({
  'g1', 'g2',
  'in2',
  'k1', 'k2', 'k3', 'k4',
  'u1', 'u2',
  'x1', 'x2',
  'y1', 'y2',
})
