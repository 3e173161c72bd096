from prometheus_client import Counter, Histogram, Gauge

num_requests = Counter("http_requests_total", "Total number of HTTP requests", ["method", "endpoint", "status_code"])
num_errors = Counter("http_request_errors_total", "Total number of HTTP request errors", ["method", "endpoint", "status_code"])
request_latency = Histogram("http_request_latency_seconds", "HTTP request latency in seconds",  ["method", "endpoint"])
requests_in_progress = Gauge("http_requests_in_progress", "Number of HTTP requests in progress")

client_requests = Counter("user_search_client_requests_total", "Total number of user search calls made by the client", ["outcome"])
client_latency = Histogram("user_search_client_latency_seconds", "User search round trip latency in seconds")
search_results_returned = Histogram("user_search_results_returned", "Number of users returned per search", ["source"])
