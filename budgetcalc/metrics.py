from prometheus_client import Counter, Histogram
REQUESTS  = Counter("bc_requests_total", "Total requests", ["endpoint","method","status"])
RULE_HITS = Counter("bc_rule_hits_total", "Discount rule that won the chain", ["rule"])
LATENCY   = Histogram("bc_request_duration_seconds", "Request latency (s)", buckets=(0.005,0.01,0.05,0.1,0.5,1,2))
