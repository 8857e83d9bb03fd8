"""Sample the default disc and print the first few points of a preview."""

from discscatter import Domain, PreviewCache
from discscatter.config import load_config
from discscatter.logging import init_logging_from_cfg

cfg = load_config(overrides={"logging": {"level": "debug"}, "preview": {"max_samples": 5}})
init_logging_from_cfg(cfg)

domain = Domain.from_mapping(cfg["sampler"])
cache = PreviewCache.from_config(cfg)
head = cache.preview(domain)
print("count:", cache.points(domain).shape[0], "misses:", cache.misses)
for x, y in head:
    print(f"{x:8.3f} {y:8.3f}")
