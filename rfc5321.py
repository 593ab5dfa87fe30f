#region PROLOGUE --------------------------------------------------------------
'''
RFC5321 envelope syntax: MAIL/RCPT arguments, mailboxes, address literals
and ESMTP parameters.

Parsing works on bytes. Internal rules follow the combinators convention
( buf, pos ) -> None | ( end, value ), public entrypoints require the whole
input to match and raise ParseError otherwise. Nothing here keeps state
between calls.

Command parsers never consume or require a line terminator, with the single
exception of command() which recognizes one complete CRLF terminated line.
'''
from __future__ import annotations

# python imports:
from ipaddress import IPv4Address, IPv6Address
import logging
from typing import (
	Any, Iterable, List, Optional as Opt, Sequence as Seq, Tuple, Type, Union,
)

# smtp_envelope imports:
from combinators import Rule, T, alt, exact, many, opt, separated, tag, tag_no_case, take_while
from rfc5234 import (
	HYPHEN, crlf, is_alnum, is_digit, is_hexdig, wsps,
)
from rfc5322 import atom, is_atext
from util import bytes_types, BYTES, ascii_slice, s2b

logger = logging.getLogger ( __name__ )


class ParseError ( Exception ):
	pass


class UpgradeError ( Exception ):
	pass


#endregion
#region CLASSIFIERS -----------------------------------------------------------

def is_esmtp_value ( c: int ) -> bool:
	# VCHAR without "="
	return 33 <= c <= 60 or 62 <= c <= 126

def is_qtext ( c: int ) -> bool:
	# qtextSMTP, unlike RFC5322 qtext this includes SP
	return 32 <= c <= 33 or 35 <= c <= 91 or 93 <= c <= 126

def is_quoted_pair_char ( c: int ) -> bool:
	return 32 <= c <= 126

def is_dcontent ( c: int ) -> bool:
	return 33 <= c <= 90 or 94 <= c <= 126

def is_ldh ( c: int ) -> bool:
	return is_alnum ( c ) or c == HYPHEN

def _is_ipv6_char ( c: int ) -> bool:
	return is_hexdig ( c ) or c == 0x3A or c == 0x2E # ':' '.'


#endregion
#region VALUES ----------------------------------------------------------------

class _Value:
	'''
	immutable value whose fields are its __slots__

	two values are equal only when they are the same class, so Atom('x') and
	Quoted('x') never compare equal
	'''
	__slots__: Tuple[str,...] = ()

	@classmethod
	def _fields ( cls ) -> Tuple[str,...]:
		# __slots__ of every class in the hierarchy, base classes first
		return tuple (
			name
			for klass in reversed ( cls.__mro__ )
			for name in vars ( klass ).get ( '__slots__', () )
		)

	def __init__ ( self, *values: Any ) -> None:
		fields = self._fields()
		assert len ( values ) == len ( fields ), f'{type(self).__name__} takes {fields!r}, got {values!r}'
		for name, value in zip ( fields, values ):
			object.__setattr__ ( self, name, value )

	def __setattr__ ( self, name: str, value: Any ) -> None:
		raise AttributeError ( f'{type(self).__name__} is immutable' )

	def __delattr__ ( self, name: str ) -> None:
		raise AttributeError ( f'{type(self).__name__} is immutable' )

	def _values ( self ) -> Tuple[Any,...]:
		return tuple ( getattr ( self, name ) for name in self._fields() )

	def __eq__ ( self, other: object ) -> bool:
		if type ( other ) is not type ( self ):
			return NotImplemented
		assert isinstance ( other, _Value )
		return self._values() == other._values()

	def __hash__ ( self ) -> int:
		return hash ( ( type ( self ).__name__, self._values() ) )

	def __reduce__ ( self ) -> Tuple[Any,...]:
		# rebuild through __init__, the default slot restore would hit __setattr__
		return type ( self ), self._values()

	def __repr__ ( self ) -> str:
		cls = type ( self )
		return f'{cls.__module__}.{cls.__name__}({", ".join(map(repr,self._values()))})'


def _quote ( text: str ) -> str:
	return '"' + text.replace ( '\\', '\\\\' ).replace ( '"', '\\"' ) + '"'


class EsmtpParam ( _Value ):
	__slots__ = ( 'name', 'value' )
	name: str
	value: Opt[str]

	def __init__ ( self, name: str, value: Opt[str] = None ) -> None:
		super().__init__ ( name, value )

	def __str__ ( self ) -> str:
		if self.value is None:
			return self.name
		return f'{self.name}={self.value}'


class LocalPart ( _Value ):
	__slots__ = ()


class Atom ( LocalPart ):
	__slots__ = ( 'text', )
	text: str

	def __init__ ( self, text: str ) -> None:
		super().__init__ ( text )

	def __str__ ( self ) -> str:
		return self.text


class Quoted ( LocalPart ):
	'''
	quoted local part, text holds the decoded content (no surrounding quotes,
	no escaping backslashes)
	'''
	__slots__ = ( 'text', )
	text: str

	def __init__ ( self, text: str ) -> None:
		super().__init__ ( text )

	def __str__ ( self ) -> str:
		return _quote ( self.text )


class DomainPart ( _Value ):
	__slots__ = ()


class Domain ( DomainPart ):
	__slots__ = ( 'name', )
	name: str

	def __init__ ( self, name: str ) -> None:
		super().__init__ ( name )

	def __str__ ( self ) -> str:
		return self.name


class AddressLiteral ( DomainPart ):
	__slots__ = ()

	@staticmethod
	def from_str ( text: str ) -> AddressLiteral:
		'''
		parse a complete bracketed literal like '[192.0.2.1]'

		unlike a literal inside a mailbox, text that fits none of the formal
		forms is kept as a FreeForm
		'''
		return address_literal ( text )


class IpAddr ( AddressLiteral ):
	__slots__ = ( 'ip', )
	ip: Union[IPv4Address,IPv6Address]

	def __init__ ( self, ip: Union[IPv4Address,IPv6Address] ) -> None:
		assert isinstance ( ip, ( IPv4Address, IPv6Address ) ), f'invalid {ip=}'
		super().__init__ ( ip )

	def __str__ ( self ) -> str:
		if self.ip.version == 6:
			return f'[IPv6:{self.ip}]'
		return f'[{self.ip}]'


class Tagged ( AddressLiteral ):
	__slots__ = ( 'tag', 'value' )
	tag: str
	value: str

	def __init__ ( self, tag: str, value: str ) -> None:
		super().__init__ ( tag, value )

	def __str__ ( self ) -> str:
		return f'[{self.tag}:{self.value}]'


class FreeForm ( AddressLiteral ):
	__slots__ = ( 'text', )
	text: str

	def __init__ ( self, text: str ) -> None:
		super().__init__ ( text )

	def __str__ ( self ) -> str:
		return f'[{self.text}]'

	def upgrade ( self ) -> AddressLiteral:
		'''
		reinterpret the stored text as an IPv4, IPv6 or tagged literal

		returns a new value, raises UpgradeError when none of them match the
		whole text
		'''
		log = logger.getChild ( 'FreeForm.upgrade' )
		try:
			buf = s2b ( self.text )
		except UnicodeEncodeError as e:
			raise UpgradeError ( f'not upgradable: {self.text!r}' ) from e
		for rule in _formal_literals:
			lit = exact ( rule, buf )
			if lit is not None:
				return lit
		log.debug ( f'no formal literal in {self.text!r}' )
		raise UpgradeError ( f'not upgradable: {self.text!r}' )


class Mailbox ( _Value ):
	__slots__ = ( 'local', 'domain' )
	local: LocalPart
	domain: DomainPart

	def __init__ ( self, local: LocalPart, domain: DomainPart ) -> None:
		super().__init__ ( local, domain )

	def __str__ ( self ) -> str:
		return f'{self.local}@{self.domain}'

	@staticmethod
	def from_str ( text: str ) -> Mailbox:
		return mailbox ( text )


class PostMaster ( _Value ):
	__slots__ = ()

	def __str__ ( self ) -> str:
		return 'postmaster'


class NullPath ( _Value ):
	__slots__ = ()

	def __str__ ( self ) -> str:
		return ''


# the RCPT TO and MAIL FROM arguments, render either one with f'<{path}>'
Path = Union[Mailbox,PostMaster]
ReversePath = Union[Mailbox,NullPath]


#endregion
#region ADDRESS LITERALS ------------------------------------------------------

def _dot ( buf: bytes, pos: int ) -> Opt[int]:
	return tag ( buf, pos, b'.' )


def _label ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	# Let-dig [Ldh-str]: starts alphanumeric and may not end with a hyphen
	if pos >= len ( buf ) or not is_alnum ( buf[pos] ):
		return None
	end = take_while ( buf, pos, is_ldh )
	assert end is not None
	if buf[end - 1] == HYPHEN:
		return None
	return end, ascii_slice ( buf, pos, end )


def _ipv4_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	octets: List[int] = []
	for i in range ( 4 ):
		if i:
			p = _dot ( buf, pos )
			if p is None:
				return None
			pos = p
		end = take_while ( buf, pos, is_digit, 1, 3 )
		if end is None:
			return None
		n = int ( buf[pos:end] )
		if n > 255:
			return None
		octets.append ( n )
		pos = end
	return pos, IpAddr ( IPv4Address ( bytes ( octets ) ) )


def _ipv6_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	p = tag_no_case ( buf, pos, b'IPv6:' )
	if p is None:
		return None
	end = take_while ( buf, p, _is_ipv6_char, 1 )
	if end is None:
		return None
	try:
		ip = IPv6Address ( ascii_slice ( buf, p, end ) )
	except ValueError: # AddressValueError: the bytes look right but don't form an address
		return None
	return end, IpAddr ( ip )


def _general_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	r = _label ( buf, pos )
	if r is None:
		return None
	p, tag_ = r
	p2 = tag ( buf, p, b':' )
	if p2 is None:
		return None
	end = take_while ( buf, p2, is_dcontent, 1 )
	if end is None:
		return None
	return end, Tagged ( tag_, ascii_slice ( buf, p2, end ) )


# order matters, "IPv6:..." is also a syntactically valid tagged literal
_formal_literals: Tuple[Rule[AddressLiteral],...] = (
	_ipv4_literal,
	_ipv6_literal,
	_general_literal,
)


def _address_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	p = tag ( buf, pos, b'[' )
	if p is None:
		return None
	for rule in _formal_literals:
		r = rule ( buf, p )
		if r is None:
			continue
		end = tag ( buf, r[0], b']' )
		if end is not None: # otherwise backtrack and try the next form
			return end, r[1]
	return None


def _free_form_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	p = tag ( buf, pos, b'[' )
	if p is None:
		return None
	end = take_while ( buf, p, is_dcontent, 1 )
	if end is None:
		return None
	after = tag ( buf, end, b']' )
	if after is None:
		return None
	return after, FreeForm ( ascii_slice ( buf, p, end ) )


def _any_address_literal ( buf: bytes, pos: int ) -> Opt[Tuple[int,AddressLiteral]]:
	return alt ( buf, pos, _address_literal, _free_form_literal )


#endregion
#region MAILBOXES -------------------------------------------------------------

def _domain ( buf: bytes, pos: int ) -> Opt[Tuple[int,Domain]]:
	r = separated ( buf, pos, _label, _dot )
	if r is None:
		return None
	end, labels = r
	return end, Domain ( '.'.join ( labels ) )


def _domain_part ( buf: bytes, pos: int ) -> Opt[Tuple[int,DomainPart]]:
	return alt ( buf, pos, _domain, _address_literal ) # type: ignore # Domain and AddressLiteral are both DomainPart


def _dot_string ( buf: bytes, pos: int ) -> Opt[Tuple[int,LocalPart]]:
	r = separated ( buf, pos, atom, _dot )
	if r is None:
		return None
	end, atoms = r
	return end, Atom ( '.'.join ( atoms ) )


def _qtext ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	end = take_while ( buf, pos, is_qtext, 1 )
	if end is None:
		return None
	return end, ascii_slice ( buf, pos, end )


def _quoted_pair ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	# backslash followed by any of %d32-126, the backslash is dropped
	p = tag ( buf, pos, b'\\' )
	if p is None:
		return None
	end = take_while ( buf, p, is_quoted_pair_char, 1, 1 )
	if end is None:
		return None
	return end, ascii_slice ( buf, p, end )


def _quoted_string ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	p = tag ( buf, pos, b'"' )
	if p is None:
		return None
	r = many ( buf, p, lambda buf, pos: alt ( buf, pos, _qtext, _quoted_pair ) )
	assert r is not None # zero matches is still a match
	p, chunks = r
	end = tag ( buf, p, b'"' )
	if end is None:
		return None
	return end, ''.join ( chunks )


def _quoted_local_part ( buf: bytes, pos: int ) -> Opt[Tuple[int,LocalPart]]:
	r = _quoted_string ( buf, pos )
	if r is None:
		return None
	return r[0], Quoted ( r[1] )


def _local_part ( buf: bytes, pos: int ) -> Opt[Tuple[int,LocalPart]]:
	return alt ( buf, pos, _dot_string, _quoted_local_part )


def _mailbox ( buf: bytes, pos: int ) -> Opt[Tuple[int,Mailbox]]:
	r = _local_part ( buf, pos )
	if r is None:
		return None
	p, local = r
	p2 = tag ( buf, p, b'@' )
	if p2 is None:
		return None
	r2 = _domain_part ( buf, p2 )
	if r2 is None:
		return None
	end, domain = r2
	return end, Mailbox ( local, domain )


#endregion
#region PATHS -----------------------------------------------------------------

def _at_domain ( buf: bytes, pos: int ) -> Opt[Tuple[int,Domain]]:
	p = tag ( buf, pos, b'@' )
	if p is None:
		return None
	return _domain ( buf, p )


def _comma ( buf: bytes, pos: int ) -> Opt[int]:
	return tag ( buf, pos, b',' )


def _source_route ( buf: bytes, pos: int ) -> Opt[Tuple[int,None]]:
	# A-d-l ":", obsolete relay list that is matched and thrown away
	r = separated ( buf, pos, _at_domain, _comma )
	if r is None:
		return None
	end = tag ( buf, r[0], b':' )
	if end is None:
		return None
	return end, None


def _path ( buf: bytes, pos: int ) -> Opt[Tuple[int,Mailbox]]:
	p = tag ( buf, pos, b'<' )
	if p is None:
		return None
	p, _ = opt ( buf, p, _source_route )
	r = _mailbox ( buf, p )
	if r is None:
		return None
	p, mbox = r
	end = tag ( buf, p, b'>' )
	if end is None:
		return None
	return end, mbox


def _null_path ( buf: bytes, pos: int ) -> Opt[Tuple[int,NullPath]]:
	end = tag ( buf, pos, b'<>' )
	if end is None:
		return None
	return end, NullPath()


def _postmaster ( buf: bytes, pos: int ) -> Opt[Tuple[int,PostMaster]]:
	end = tag_no_case ( buf, pos, b'<postmaster>' )
	if end is None:
		return None
	return end, PostMaster()


def _reverse_path ( buf: bytes, pos: int ) -> Opt[Tuple[int,ReversePath]]:
	return alt ( buf, pos, _path, _null_path ) # type: ignore # union of rule results


def _forward_path ( buf: bytes, pos: int ) -> Opt[Tuple[int,Path]]:
	return alt ( buf, pos, _postmaster, _path ) # type: ignore # union of rule results


#endregion
#region ESMTP PARAMETERS ------------------------------------------------------

def _esmtp_keyword ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	end = take_while ( buf, pos, is_alnum, 1 )
	if end is None:
		return None
	return end, ascii_slice ( buf, pos, end )


def _esmtp_value ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	p = tag ( buf, pos, b'=' )
	if p is None:
		return None
	end = take_while ( buf, p, is_esmtp_value, 1 )
	if end is None:
		return None
	return end, ascii_slice ( buf, p, end )


def _esmtp_param ( buf: bytes, pos: int ) -> Opt[Tuple[int,EsmtpParam]]:
	r = _esmtp_keyword ( buf, pos )
	if r is None:
		return None
	p, name = r
	end, value = opt ( buf, p, _esmtp_value )
	return end, EsmtpParam ( name, value )


def _esmtp_params ( buf: bytes, pos: int ) -> Opt[Tuple[int,List[EsmtpParam]]]:
	# esmtp-param *(1*WSP esmtp-param), duplicates are kept in source order
	return separated ( buf, pos, _esmtp_param, wsps )


def _params_suffix ( buf: bytes, pos: int ) -> Tuple[int,Tuple[EsmtpParam,...]]:
	# [SP Mail-parameters], a lone trailing SP is not an empty parameter list
	p = tag ( buf, pos, b' ' )
	if p is None:
		return pos, ()
	r = _esmtp_params ( buf, p )
	if r is None:
		return pos, ()
	return r[0], tuple ( r[1] )


#endregion
#region COMMANDS --------------------------------------------------------------

class Command ( _Value ):
	__slots__ = ()
	verb: str # class attribute, the canonical spelling used for rendering

	def _args ( self ) -> str:
		return ''

	def __str__ ( self ) -> str:
		return f'{self.verb}{self._args()}\r\n'


def _string_arg ( text: str ) -> str:
	# String = Atom / Quoted-string
	if text and all ( is_atext ( ord ( c ) ) for c in text ):
		return text
	return _quote ( text )


def _params_arg ( params: Seq[EsmtpParam] ) -> str:
	return ''.join ( f' {param}' for param in params )


class Ehlo ( Command ):
	verb = 'EHLO'
	__slots__ = ( 'domain', )
	domain: DomainPart

	def __init__ ( self, domain: DomainPart ) -> None:
		super().__init__ ( domain )

	def _args ( self ) -> str:
		return f' {self.domain}'


class Helo ( Command ):
	verb = 'HELO'
	__slots__ = ( 'domain', )
	domain: Domain

	def __init__ ( self, domain: Domain ) -> None:
		super().__init__ ( domain )

	def _args ( self ) -> str:
		return f' {self.domain}'


class Mail ( Command ):
	verb = 'MAIL FROM:'
	__slots__ = ( 'path', 'params' )
	path: ReversePath
	params: Tuple[EsmtpParam,...]

	def __init__ ( self, path: ReversePath, params: Iterable[EsmtpParam] = () ) -> None:
		super().__init__ ( path, tuple ( params ) )

	def _args ( self ) -> str:
		return f'<{self.path}>{_params_arg(self.params)}'


class Rcpt ( Command ):
	verb = 'RCPT TO:'
	__slots__ = ( 'path', 'params' )
	path: Path
	params: Tuple[EsmtpParam,...]

	def __init__ ( self, path: Path, params: Iterable[EsmtpParam] = () ) -> None:
		super().__init__ ( path, tuple ( params ) )

	def _args ( self ) -> str:
		return f'<{self.path}>{_params_arg(self.params)}'


class Data ( Command ):
	verb = 'DATA'
	__slots__ = ()


class Rset ( Command ):
	verb = 'RSET'
	__slots__ = ()


class Quit ( Command ):
	verb = 'QUIT'
	__slots__ = ()


class _StringCommand ( Command ):
	__slots__ = ( 'text', )
	text: str

	def __init__ ( self, text: str ) -> None:
		super().__init__ ( text )

	def _args ( self ) -> str:
		return f' {_string_arg(self.text)}'


class Vrfy ( _StringCommand ):
	verb = 'VRFY'
	__slots__ = ()


class Expn ( _StringCommand ):
	verb = 'EXPN'
	__slots__ = ()


class _OptStringCommand ( Command ):
	__slots__ = ( 'text', )
	text: Opt[str]

	def __init__ ( self, text: Opt[str] = None ) -> None:
		super().__init__ ( text )

	def _args ( self ) -> str:
		if self.text is None:
			return ''
		return f' {_string_arg(self.text)}'


class Help ( _OptStringCommand ):
	verb = 'HELP'
	__slots__ = ()


class Noop ( _OptStringCommand ):
	verb = 'NOOP'
	__slots__ = ()


def _mail ( buf: bytes, pos: int ) -> Opt[Tuple[int,Mail]]:
	p = tag_no_case ( buf, pos, b'MAIL FROM:' )
	if p is None:
		return None
	r = _reverse_path ( buf, p )
	if r is None:
		return None
	end, params = _params_suffix ( buf, r[0] )
	return end, Mail ( r[1], params )


def _rcpt ( buf: bytes, pos: int ) -> Opt[Tuple[int,Rcpt]]:
	p = tag_no_case ( buf, pos, b'RCPT TO:' )
	if p is None:
		return None
	r = _forward_path ( buf, p )
	if r is None:
		return None
	end, params = _params_suffix ( buf, r[0] )
	return end, Rcpt ( r[1], params )


def _verb_sp ( buf: bytes, pos: int, verb: str ) -> Opt[int]:
	p = tag_no_case ( buf, pos, s2b ( verb ) )
	if p is None:
		return None
	return tag ( buf, p, b' ' )


def _ehlo ( buf: bytes, pos: int ) -> Opt[Tuple[int,Ehlo]]:
	p = _verb_sp ( buf, pos, Ehlo.verb )
	if p is None:
		return None
	r = _domain_part ( buf, p )
	if r is None:
		return None
	return r[0], Ehlo ( r[1] )


def _helo ( buf: bytes, pos: int ) -> Opt[Tuple[int,Helo]]:
	p = _verb_sp ( buf, pos, Helo.verb )
	if p is None:
		return None
	r = _domain ( buf, p )
	if r is None:
		return None
	return r[0], Helo ( r[1] )


def _string ( buf: bytes, pos: int ) -> Opt[Tuple[int,str]]:
	return alt ( buf, pos, atom, _quoted_string )


def _no_arg ( cls: Type[Command] ) -> Rule[Command]:
	def rule ( buf: bytes, pos: int ) -> Opt[Tuple[int,Command]]:
		end = tag_no_case ( buf, pos, s2b ( cls.verb ) )
		if end is None:
			return None
		return end, cls()
	return rule


def _string_cmd ( cls: Type[Command] ) -> Rule[Command]:
	def rule ( buf: bytes, pos: int ) -> Opt[Tuple[int,Command]]:
		p = _verb_sp ( buf, pos, cls.verb )
		if p is None:
			return None
		r = _string ( buf, p )
		if r is None:
			return None
		return r[0], cls ( r[1] )
	return rule


def _opt_string_cmd ( cls: Type[Command] ) -> Rule[Command]:
	def rule ( buf: bytes, pos: int ) -> Opt[Tuple[int,Command]]:
		p = tag_no_case ( buf, pos, s2b ( cls.verb ) )
		if p is None:
			return None
		r = _verb_sp ( buf, pos, cls.verb )
		if r is not None:
			r2 = _string ( buf, r )
			if r2 is not None:
				return r2[0], cls ( r2[1] )
		return p, cls()
	return rule


_commands: Tuple[Rule[Command],...] = (
	_ehlo, # type: ignore
	_helo, # type: ignore
	_mail, # type: ignore
	_rcpt, # type: ignore
	_no_arg ( Data ),
	_no_arg ( Rset ),
	_no_arg ( Quit ),
	_string_cmd ( Vrfy ),
	_string_cmd ( Expn ),
	_opt_string_cmd ( Help ),
	_opt_string_cmd ( Noop ),
)


def _command_line ( buf: bytes, pos: int ) -> Opt[Tuple[int,Command]]:
	for rule in _commands:
		r = rule ( buf, pos )
		if r is None:
			continue
		end = crlf ( buf, r[0] )
		if end is not None:
			return end, r[1]
	return None


#endregion
#region PUBLIC API ------------------------------------------------------------

def _input ( data: Union[BYTES,str] ) -> bytes:
	if isinstance ( data, str ):
		try:
			return s2b ( data )
		except UnicodeEncodeError as e:
			raise ParseError ( f'non-ascii input: {data!r}' ) from e
	assert isinstance ( data, bytes_types ), f'invalid {data=}'
	return bytes ( data )


def _parse ( rule: Rule[T], data: Union[BYTES,str], what: str ) -> T:
	log = logger.getChild ( '_parse' )
	buf = _input ( data )
	value = exact ( rule, buf )
	if value is None:
		log.debug ( f'rejecting {what}: {buf!r}' )
		raise ParseError ( f'invalid {what}: {buf!r}' )
	return value


def esmtp_params ( data: Union[BYTES,str] ) -> List[EsmtpParam]:
	'''
	parse a whitespace separated ESMTP parameter list like b'SIZE=1000 BODY=8BITMIME'

	empty input is an empty list
	'''
	buf = _input ( data )
	if not buf:
		return []
	return _parse ( _esmtp_params, buf, 'esmtp parameters' )


def mail_command ( data: Union[BYTES,str] ) -> Tuple[ReversePath,List[EsmtpParam]]:
	'''
	parse b'MAIL FROM:<...> [params]' without a line terminator
	'''
	cmd = _parse ( _mail, data, 'MAIL command' )
	return cmd.path, list ( cmd.params )


def rcpt_command ( data: Union[BYTES,str] ) -> Tuple[Path,List[EsmtpParam]]:
	'''
	parse b'RCPT TO:<...> [params]' without a line terminator
	'''
	cmd = _parse ( _rcpt, data, 'RCPT command' )
	return cmd.path, list ( cmd.params )


def command ( line: Union[BYTES,str] ) -> Command:
	'''
	parse one complete CRLF terminated command line, the CRLF is required
	'''
	return _parse ( _command_line, line, 'command line' )


def mailbox ( data: Union[BYTES,str] ) -> Mailbox:
	return _parse ( _mailbox, data, 'mailbox' )


def validate_address ( data: Union[BYTES,str] ) -> bool:
	try:
		mailbox ( data )
	except ParseError:
		return False
	return True


def address_literal ( data: Union[BYTES,str] ) -> AddressLiteral:
	return _parse ( _any_address_literal, data, 'address literal' )

#endregion
