# This package contains the four storefront service facades and their shared wiring.
# Each facade maps one method to one backend endpoint; `dependencies` builds them from settings.
