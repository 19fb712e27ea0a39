"""Hand-picked image search phrases per status code.

The phrases bias the photo search toward a situation that matches the code
better than the bare reason phrase would. The table is partial on purpose:
a code without an entry falls back to a query built from its message.
"""
from typing import Dict, Optional

CONTEXTUAL_QUERIES: Dict[int, str] = {
    # 1xx Informational
    100: 'rabbit waiting listening',
    101: 'rabbit changing switching',
    102: 'rabbit working busy processing',
    103: 'rabbit preparing getting ready',

    # 2xx Success
    200: 'rabbit happy successful',
    201: 'rabbit building creating',
    202: 'rabbit nodding accepting',
    203: 'rabbit messenger delivering',
    204: 'rabbit empty blank',
    205: 'rabbit cleaning refreshing',
    206: 'rabbit eating partial',
    207: 'rabbit multiple group',
    208: 'rabbit already done',
    226: 'rabbit transformed different',

    # 3xx Redirection
    300: 'rabbit choosing options paths',
    301: 'rabbit moving permanently',
    302: 'rabbit hopping temporary',
    303: 'rabbit pointing directing',
    304: 'rabbit same unchanged',
    305: 'rabbit behind fence proxy',
    306: 'rabbit confused old',
    307: 'rabbit detour temporary',
    308: 'rabbit moved new home',

    # 4xx Client Errors
    400: 'rabbit confused question',
    401: 'rabbit guard blocking',
    402: 'rabbit money payment',
    403: 'rabbit forbidden no entry',
    404: 'rabbit lost hiding missing',
    405: 'rabbit stop rejected',
    406: 'rabbit picky refusing',
    407: 'rabbit gatekeeper',
    408: 'rabbit sleeping timeout',
    409: 'rabbit fighting conflict',
    410: 'rabbit gone empty',
    411: 'rabbit measuring length',
    412: 'rabbit requirements failed',
    413: 'rabbit too big large',
    414: 'rabbit long stretched',
    415: 'rabbit wrong format',
    416: 'rabbit reaching unreachable',
    417: 'rabbit disappointed expectation',
    418: 'rabbit teapot tea',
    421: 'rabbit wrong place misdirected',
    422: 'rabbit rules validation',
    423: 'rabbit locked cage',
    424: 'rabbit chain dependent',
    425: 'rabbit early too soon',
    426: 'rabbit upgrade level up',
    428: 'rabbit requirement needed',
    429: 'rabbit tired exhausted rate limit',
    430: 'rabbit header',
    431: 'rabbit overwhelmed too much',
    440: 'rabbit session expired',
    444: 'rabbit silent no response',
    449: 'rabbit retry again',
    450: 'rabbit parental blocked',
    # 451 searches by its message
    460: 'rabbit closed connection',
    463: 'rabbit many addresses',
    494: 'rabbit header large',
    495: 'rabbit certificate ssl',
    496: 'rabbit certificate required',
    497: 'rabbit secure https',
    498: 'rabbit token invalid',
    499: 'rabbit quit left',

    # 5xx Server Errors
    500: 'rabbit broken error crash',
    501: 'rabbit shrug not implemented',
    502: 'rabbit bad gateway middleman',
    503: 'rabbit maintenance down',
    504: 'rabbit timeout waiting clock',
    505: 'rabbit old version outdated',
    506: 'rabbit circular loop',
    507: 'rabbit full storage',
    508: 'rabbit infinite loop dizzy',
    510: 'rabbit extension required',
    511: 'rabbit network authentication',
    520: 'rabbit unknown mystery',
    521: 'rabbit down offline',
    522: 'rabbit timeout connection',
    523: 'rabbit unreachable far',
    524: 'rabbit timeout slow',
    525: 'rabbit handshake ssl',
    526: 'rabbit certificate invalid',
    527: 'rabbit railgun error',
    529: 'rabbit overloaded stress',
    530: 'rabbit frozen ice',
    561: 'rabbit unauthorized',
    598: 'rabbit network timeout',
    599: 'rabbit network timeout',
}


def contextual_query(code: Optional[int]) -> Optional[str]:
    if code is None:
        return None
    return CONTEXTUAL_QUERIES.get(code)
