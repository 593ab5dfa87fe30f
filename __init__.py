# system imports:
import packaging.version

# smtp_envelope imports:
import rfc5321

__version__ = packaging.version.parse ( '0.1.0' )

'''
NOTE: the grammar lives in flat modules, import them directly:

import rfc5321

rfc5321.mail_command ( b'MAIL FROM:<zaphod@beeblebrox.com> SIZE=1000' )
'''
